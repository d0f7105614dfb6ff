# steam_market_info/item_io.py
from __future__ import annotations

import os
from typing import List, Optional, Tuple, Union

from .errors import FormatError
from .log import get_logger
from .models import Item, ItemOrItems, as_item_list

log = get_logger(__name__)

QUOTE = '"'
ESCAPE = "\\"
SEPARATOR = " | "


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


# ------------------------ reading ------------------------

def parse_item_line(line: str) -> Tuple[str, int, int]:
    """
    Split one input line `"<name>" <appId>[ <currencyId>]` into
    (name, app_id, currency_id). Inside the name, \\" stands for a quote.
    Raises FormatError for anything else.
    """
    text = line.rstrip()
    if not text.startswith(QUOTE):
        raise FormatError(line)

    # name: everything up to the first unescaped closing quote
    chars: List[str] = []
    i = 1
    closed = False
    while i < len(text):
        c = text[i]
        if c == ESCAPE and text[i + 1:i + 2] == QUOTE:
            chars.append(QUOTE)
            i += 2
            continue
        if c == QUOTE:
            closed = True
            i += 1
            break
        chars.append(c)
        i += 1

    if not closed or not chars:
        raise FormatError(line)

    # numbers: " <appId>" then optionally " <currencyId>", single spaces only
    rest = text[i:]
    if not rest.startswith(" "):
        raise FormatError(line)
    tokens = rest[1:].split(" ")
    if len(tokens) > 2 or not all(_is_number(t) for t in tokens):
        raise FormatError(line)

    app_id = int(tokens[0])
    currency_id = int(tokens[1]) if len(tokens) == 2 else 1
    return "".join(chars), app_id, currency_id


def read_items_from_file(path: Union[str, os.PathLike]) -> List[Item]:
    """
    Read items from a text file, one `"<name>" <appId>[ <currencyId>]` per
    line. Blank lines are skipped; currencyId defaults to 1.

    The first malformed line aborts the read with FormatError. Values that
    parse but are not valid for an Item raise pydantic's ValidationError.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = f.read()

    items: List[Item] = []
    for line in data.split("\n"):
        if not line.strip():
            continue
        name, app_id, currency_id = parse_item_line(line)
        items.append(Item(name, app_id, currency_id))

    log.debug("Read %d item(s) from %s", len(items), path)
    return items


# ------------------------ writing ------------------------

def _cell(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def format_item_line(item: Item) -> str:
    """`"<name>" | <lowest> | <median> | <volume>`, unknowns left empty."""
    return SEPARATOR.join([
        f"{QUOTE}{item.name}{QUOTE}",
        _cell(item.lowest_price),
        _cell(item.median_price),
        _cell(item.volume),
    ])


def save_items_to_file(path: Union[str, os.PathLike], items: ItemOrItems) -> None:
    """
    Overwrite `path` with one line per item. Lines are joined with "\\n" and
    the file has no trailing newline.
    """
    rows = [format_item_line(item) for item in as_item_list(items)]

    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write("\n".join(rows))

    log.debug("Wrote %d item(s) to %s", len(rows), path)


def print_items(items: ItemOrItems) -> None:
    for item in as_item_list(items):
        print(str(item))
