# cardface/common/logging_utils.py

import logging
import os
import sys

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Default is WARNING so a plain run only prints the deck.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cardface/main.py). Logs go to stderr."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"cardface.{name}")
