# steam_market_info/errors.py
from pydantic import ValidationError

__all__ = ["FormatError", "ValidationError"]


class FormatError(ValueError):
    """An input line that is not `"<name>" <appId>[ <currencyId>]`."""

    def __init__(self, line: str):
        super().__init__(f"Invalid file format: {line}")
        self.line = line
