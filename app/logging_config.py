# /ministry-dashboard-backend/app/logging_config.py

import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Sets up root logging once; later calls leave existing handlers alone."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
