import logging

from taskboard.config import Settings

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(settings: Settings):
    """Attach the app's handlers to the ``taskboard`` logger once."""
    logger = logging.getLogger("taskboard")
    logger.setLevel(settings.log_level.upper())
    if logger.handlers:
        return logger

    formatter = logging.Formatter(FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.log_file:
        handler = logging.FileHandler(settings.log_file)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
