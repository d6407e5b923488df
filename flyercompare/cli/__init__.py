"""Command-line interface for flyercompare."""
