import logging

from config.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging once for the app process."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
