# steam_market_info/models.py
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


def _null(value: Any) -> str:
    return "null" if value is None else str(value)


class Item(BaseModel):
    """
    One Steam Community Market listing query plus its latest observed prices.

    name / app_id / currency_id identify the listing and are fixed at
    construction. The price fields start unset (None) and are filled in by
    the market client. Every assignment is validated, so bad values raise
    pydantic's ValidationError and leave the field untouched.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: StrictStr = Field(frozen=True)
    app_id: StrictInt = Field(frozen=True, ge=0)
    currency_id: StrictInt = Field(default=1, frozen=True, gt=0)
    lowest_price: Optional[StrictStr] = None
    median_price: Optional[StrictStr] = None
    volume: Optional[StrictInt] = Field(default=None, ge=0)

    def __init__(self, name: str, app_id: int, currency_id: int = 1) -> None:
        super().__init__(name=name, app_id=app_id, currency_id=currency_id)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must be a non-empty string")
        return v

    @field_validator("lowest_price", "median_price")
    @classmethod
    def _price_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("price must be a non-empty string or None")
        return v

    def _key(self) -> tuple:
        return (
            self.name,
            self.app_id,
            self.currency_id,
            self.lowest_price,
            self.median_price,
            self.volume,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self._key() == other._key()

    def __str__(self) -> str:
        return (
            f"Item {{ name: {self.name}, appId: {self.app_id}, currencyId: {self.currency_id}, "
            f"lowestPrice: {_null(self.lowest_price)}, medianPrice: {_null(self.median_price)}, "
            f"volume: {_null(self.volume)} }}"
        )


class PriceOverview(BaseModel):
    """Body of a priceoverview response. Prices stay as Steam formats them."""

    success: bool = False
    lowest_price: Optional[str] = None
    median_price: Optional[str] = None
    volume: Optional[int] = Field(default=None, ge=0)

    @field_validator("lowest_price", "median_price", mode="before")
    @classmethod
    def _empty_price_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("volume", mode="before")
    @classmethod
    def _parse_volume(cls, v):
        # Steam sends volume as a digit string, with thousands separators above 999
        if isinstance(v, str):
            v = v.replace(",", "").strip()
            if not v:
                return None
        return v


ItemOrItems = Union[Item, Sequence[Item]]

def as_item_list(items: ItemOrItems) -> List[Item]:
    """A lone Item becomes a one-element list; lists and tuples are copied."""
    return list(items) if isinstance(items, (list, tuple)) else [items]
