"""Workflow orchestration used by the CLI: compare, search, catalog sync and saved lists."""
