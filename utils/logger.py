import logging
import sys
from settings.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False

def _configure_root():
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("listed_vegan")
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
    root.propagate = False
    _configured = True

def get_logger(name: str) -> logging.Logger:
    """
    Returns a named child of the application logger so every module
    shares one handler and level.
    """
    _configure_root()
    return logging.getLogger(f"listed_vegan.{name}")
