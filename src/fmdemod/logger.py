import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None):
    """Configure root logging for scripts using fmdemod."""
    logging.basicConfig(
        level=level or os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
