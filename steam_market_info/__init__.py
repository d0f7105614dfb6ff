from .config import PRICE_OVERVIEW_URL
from .errors import FormatError, ValidationError
from .item_io import (
    format_item_line,
    parse_item_line,
    print_items,
    read_items_from_file,
    save_items_to_file,
)
from .log import setup_logging
from .models import Item, PriceOverview
from .steam_client import SteamMarketClient, get_items_info, refresh_items

__all__ = [
    "PRICE_OVERVIEW_URL",
    "FormatError",
    "ValidationError",
    "Item",
    "PriceOverview",
    "SteamMarketClient",
    "get_items_info",
    "refresh_items",
    "read_items_from_file",
    "save_items_to_file",
    "format_item_line",
    "parse_item_line",
    "print_items",
    "setup_logging",
]
