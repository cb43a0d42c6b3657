import logging
from typing import Optional

from config.logging_config import get_logging_config


def setup_logging(level: Optional[str] = None) -> None:
    """Minimal logging setup used by library modules.

    - Sets root logger level (environment default when not given)
    - Ensures a basic StreamHandler is attached once
    """
    config = get_logging_config()
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config["console_format"]))
        root.addHandler(handler)
    root.setLevel(getattr(logging, (level or config["default_level"]).upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger after ensuring logging is initialized."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
