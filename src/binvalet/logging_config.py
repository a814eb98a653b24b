"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


def configure(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
