from __future__ import annotations

import logging

from credhub.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Loggers that follow CREDHUB_LOG_LEVEL instead of the root level
CLIENT_LOGGERS = ("credhub.support", "credhub.services")


def _level(name: str | None, default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def configure_logging() -> None:
    root_level = _level(settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=root_level, format=LOG_FORMAT)

    client_level = _level(settings.CREDHUB_LOG_LEVEL, logging.WARNING)
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
