import logging

from caesar_cracker.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Install a single stream handler on the package logger."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)

    logger = logging.getLogger("caesar_cracker")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
