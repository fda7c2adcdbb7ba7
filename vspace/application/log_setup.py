# vspace/application/log_setup.py
import sys
from typing import Any
from loguru import logger
from vspace.application.settings import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> <cyan>{name}:{line}</cyan> - "
    "<level>{message}</level>"
)


def log_level(settings: Settings) -> str:
    if settings.log_level:
        return settings.log_level.upper()
    return "DEBUG" if settings.debug else "INFO"


def setup_logging(settings: Settings | None = None, sink: Any = sys.stdout) -> None:
    """Send every record to one sink, tagged with the app environment."""
    settings = settings or get_settings()

    logger.remove()  # remove default handler(s) to avoid duplicates on reload
    logger.configure(extra={"app": settings.app_env})
    logger.add(
        sink,
        level=log_level(settings),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
