from __future__ import annotations

import logging

_LOGGER_NAME = "car_registry"
_HANDLER_FLAG = "_car_registry_log_handler"

_LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-5s %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def _ensure_handler(logger: logging.Logger, level: int) -> None:
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_FLAG, False):
            handler.setLevel(level)
            return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger. Safe to call repeatedly."""
    logger = logging.getLogger(_LOGGER_NAME)
    parsed_level = _parse_level(level)
    logger.setLevel(parsed_level)
    _ensure_handler(logger, parsed_level)
    return logger
