import asyncio

import steam_market_info as market


async def example_manual_items() -> None:
    items = [
        market.Item("MP9 | Storm (Minimal Wear)", 730),
        market.Item("AK-47 | Redline (Field-Tested)", 730),
    ]
    await market.get_items_info(items)
    market.print_items(items)


async def example_file_round_trip() -> None:
    items = market.read_items_from_file("examples/input.txt")
    await market.get_items_info(items)
    market.save_items_to_file("examples/output.txt", items)


async def main() -> None:
    await example_manual_items()
    await example_file_round_trip()


if __name__ == "__main__":
    market.setup_logging()
    asyncio.run(main())
