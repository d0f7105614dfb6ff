# steam_market_info/main.py
from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from .config import require_config
from .errors import FormatError, ValidationError
from .item_io import print_items, read_items_from_file, save_items_to_file
from .log import get_logger, setup_logging
from .steam_client import refresh_items

log = get_logger(__name__)


def _parse_args(argv: list[str]) -> dict:
    p = argparse.ArgumentParser(
        prog="steam_market_info",
        description="Refresh Steam Market prices for the items listed in a file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("input", help='Item list, one `"<name>" <appId>[ <currencyId>]` per line.')
    p.add_argument("output", help="Where to write `\"<name>\" | <lowest> | <median> | <volume>` lines.")
    return vars(p.parse_args(argv))


def main(argv: list[str] | None = None) -> None:
    # 1) Parse CLI args
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    # 2) Load environment and logging
    load_dotenv(override=False)
    setup_logging()
    try:
        require_config()
    except RuntimeError as e:
        print(f"ERROR: {e}")
        sys.exit(2)

    # 3) Read input
    try:
        items = read_items_from_file(args["input"])
    except (FormatError, ValidationError, OSError) as e:
        print(f"ERROR: {e}")
        sys.exit(2)

    # 4) Refresh prices and show them
    refresh_items(items)
    print_items(items)

    # 5) Save
    try:
        save_items_to_file(args["output"], items)
    except OSError as e:
        print(f"ERROR: {e}")
        sys.exit(2)
    log.info("Wrote %d item(s) to %s", len(items), args["output"])


if __name__ == "__main__":
    main()
