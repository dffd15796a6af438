"""Logging setup for hosts that want the package's log output. The package itself never configures logging on import."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("voicemove").setLevel(level.upper())
