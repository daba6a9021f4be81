import logging
import sys

from aws_lambda_powertools import Logger

SERVICE_NAME = "placeindex"

# Python logging has no TRACE, debug is the closest
LOG_LEVELS = {
    "error": "ERROR",
    "warn": "WARNING",
    "info": "INFO",
    "debug": "DEBUG",
    "trace": "DEBUG",
}


def resolve_level(loglevel: str) -> str:
    return LOG_LEVELS.get((loglevel or "").lower(), "INFO")


def build_logger(loglevel: str = "info", service: str = SERVICE_NAME) -> Logger:
    """Structured JSON logger on stderr; stdout is reserved for command output."""
    logger = Logger(
        service=service,
        level=resolve_level(loglevel),
        logger_handler=logging.StreamHandler(sys.stderr),
    )
    # Logger keeps the first level it was built with for a given service
    logger.setLevel(resolve_level(loglevel))
    return logger
