import logging
import sys
from typing import Optional

from hookguide.config.settings import settings


def setup_logging(log_level: Optional[str] = None):
    """Configure root logging once at startup."""
    level = log_level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
