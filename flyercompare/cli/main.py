#!/usr/bin/env python3

import argparse
import logging
from collections.abc import Sequence

from flyercompare.cli import commands
from flyercompare.runtime import set_log_level


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="flyercompare",
        description="Flyer deal comparison utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  fetch                      Fetch the deal catalog into the local cache
  apply-changes <file>       Replay insert/update/delete payloads on the cache
  compare <id>...            Compare picked deals across stores
  search <query>             Search deals (--mode single|combo)
  save-list <name> <id>...   Save a basket as a shopping list
  lists                      Show saved shopping lists
  share <list-id>            Print a saved list as shareable text
  delete-list <list-id>      Delete a saved list
  clear-lists                Delete all saved lists
  serve [--port]             Start the comparison HTTP service
""",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch the deal catalog")
    fetch_parser.add_argument("--output", default=None, help="Cache file to write (default: data/catalog.json)")

    changes_parser = subparsers.add_parser("apply-changes", help="Apply catalog change payloads")
    changes_parser.add_argument("changes", help="JSON file with change payloads")
    changes_parser.add_argument("--catalog", default=None, help="Catalog JSON file (default: cached catalog)")

    compare_parser = subparsers.add_parser("compare", help="Compare picked deals")
    compare_parser.add_argument("pick_ids", nargs="+", help="Catalog ids of the deals to compare")
    compare_parser.add_argument("--basket", nargs="*", default=None, help="Catalog ids selected into the basket")
    compare_parser.add_argument("--budget", default=None, help="Spending ceiling")
    compare_parser.add_argument("--catalog", default=None, help="Catalog JSON file (default: cached catalog)")

    search_parser = subparsers.add_parser("search", help="Search deals")
    search_parser.add_argument("query", help="Search text (at least 2 characters)")
    search_parser.add_argument("--mode", choices=["single", "combo"], default=None, help="Restrict to deal type")
    search_parser.add_argument("--catalog", default=None, help="Catalog JSON file (default: cached catalog)")

    save_parser = subparsers.add_parser("save-list", help="Save a basket as a shopping list")
    save_parser.add_argument("name", help="List name")
    save_parser.add_argument("deal_ids", nargs="+", help="Catalog ids to include")
    save_parser.add_argument("--catalog", default=None, help="Catalog JSON file (default: cached catalog)")

    subparsers.add_parser("lists", help="Show saved shopping lists")

    share_parser = subparsers.add_parser("share", help="Print a saved list as shareable text")
    share_parser.add_argument("list_id", help="Saved list id")

    delete_parser = subparsers.add_parser("delete-list", help="Delete a saved list")
    delete_parser.add_argument("list_id", help="Saved list id")

    subparsers.add_parser("clear-lists", help="Delete all saved lists")

    serve_parser = subparsers.add_parser("serve", help="Start the comparison HTTP service")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "fetch": commands.cmd_fetch,
        "apply-changes": commands.cmd_apply_changes,
        "compare": commands.cmd_compare,
        "search": commands.cmd_search,
        "save-list": commands.cmd_save_list,
        "lists": commands.cmd_lists,
        "share": commands.cmd_share,
        "delete-list": commands.cmd_delete_list,
        "clear-lists": commands.cmd_clear_lists,
        "serve": commands.cmd_serve,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
