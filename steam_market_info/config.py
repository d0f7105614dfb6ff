# steam_market_info/config.py
import os
from dotenv import load_dotenv

load_dotenv()

PRICE_OVERVIEW_URL = "http://steamcommunity.com/market/priceoverview"

CFG = {
    "STEAM_PRICE_URL": os.getenv("STEAM_PRICE_URL", PRICE_OVERVIEW_URL).strip(),
    # only applied by setup_logging(); the library never configures logging itself
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "WARNING").strip().upper(),
}

def require_config() -> None:
    if not CFG["STEAM_PRICE_URL"]:
        raise RuntimeError(
            "STEAM_PRICE_URL is set but empty in .env\n"
            "Example:\nSTEAM_PRICE_URL=http://steamcommunity.com/market/priceoverview\n"
            "LOG_LEVEL=INFO"
        )
