# steam_market_info/steam_client.py
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx

from .config import CFG, require_config
from .log import get_logger
from .models import Item, ItemOrItems, PriceOverview, as_item_list

log = get_logger(__name__)

# ---------------------------------------------
# Helpers
# ---------------------------------------------

def _query_params(item: Item) -> Dict[str, Any]:
    return {
        "currency": item.currency_id,
        "appid": item.app_id,
        "market_hash_name": item.name,
    }

def apply_price_overview(item: Item, overview: PriceOverview) -> None:
    """Copy a successful overview onto the item. Absent fields become None."""
    item.lowest_price = overview.lowest_price
    item.median_price = overview.median_price
    item.volume = overview.volume

# ---------------------------------------------
# Client
# ---------------------------------------------

class SteamMarketClient:
    """
    Refreshes Items from the Steam Community Market priceoverview endpoint.

    price_url defaults to CFG["STEAM_PRICE_URL"]. transport is handed to the
    underlying httpx.AsyncClient (tests pass an httpx.MockTransport).
    """

    def __init__(
        self,
        price_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if price_url is None:
            require_config()
            price_url = CFG["STEAM_PRICE_URL"]
        self.price_url = price_url
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # no timeout: a hung request holds its branch of the batch open
        return httpx.AsyncClient(transport=self._transport, timeout=None, follow_redirects=True)

    async def search_item(
        self,
        item: Item,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Optional[PriceOverview]:
        """
        One priceoverview lookup. Returns None when Steam reports no data or
        the request fails in any way (transport, status, body).
        """
        if client is None:
            async with self._client() as own:
                return await self.search_item(item, own)

        params = _query_params(item)
        log.debug("GET %s %s", self.price_url, params)

        try:
            r = await client.get(self.price_url, params=params)
            log.debug("Status %s for %r", r.status_code, item.name)
            r.raise_for_status()
            overview = PriceOverview.model_validate(r.json())
        except httpx.HTTPError as e:
            log.warning("Lookup failed for %r: %s", item.name, e)
            return None
        except ValueError as e:
            # not JSON, not an object, or a volume that is not a count
            log.warning("Unusable response for %r: %s", item.name, e)
            return None

        if not overview.success:
            log.info("No market data for %r (success=false)", item.name)
            return None
        return overview

    async def _refresh(self, item: Item, client: httpx.AsyncClient) -> None:
        overview = await self.search_item(item, client)
        if overview is not None:
            apply_price_overview(item, overview)

    async def get_items_info(self, items: ItemOrItems) -> None:
        """
        Look up every item concurrently and fill in lowest_price, median_price
        and volume in place. Items whose lookup fails keep their old values.
        """
        batch = as_item_list(items)
        if not batch:
            return
        async with self._client() as client:
            await asyncio.gather(*(self._refresh(item, client) for item in batch))

# ---------------------------------------------
# Module-level shortcuts
# ---------------------------------------------

async def get_items_info(items: ItemOrItems, client: Optional[SteamMarketClient] = None) -> None:
    await (client or SteamMarketClient()).get_items_info(items)

def refresh_items(items: ItemOrItems, client: Optional[SteamMarketClient] = None) -> None:
    """Blocking wrapper around get_items_info for non-async callers."""
    asyncio.run(get_items_info(items, client))
