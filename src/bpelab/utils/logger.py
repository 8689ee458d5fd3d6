import logging
import sys

# Centralized logging config
logging.basicConfig(
    level=logging.INFO,  # or DEBUG to see every merge
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance for the given module/class."""
    return logging.getLogger(name)
