# steam_market_info/log.py
import logging
import sys

from .config import CFG

_configured = False

logging.getLogger("steam_market_info").addHandler(logging.NullHandler())


def setup_logging(level: str | None = None) -> None:
    """
    Attach a stdout handler to the root logger. Called by the command-line
    entry point only; library code just asks for loggers.
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, (level or CFG["LOG_LEVEL"]).upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid duplicate handlers
    if not root.handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(log_level)
        ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(ch)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
