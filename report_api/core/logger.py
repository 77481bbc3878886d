import logging
from colorlog import ColoredFormatter
from report_api.core.settings import settings

# thread name shows which worker touched the shared store
LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] "
    "%(reset)s%(blue)s%(name)s%(reset)s (%(threadName)s) %(message)s"
)

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

formatter = ColoredFormatter(
    LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    reset=True,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    },
)

handler = logging.StreamHandler()
handler.setFormatter(formatter)

logger = logging.getLogger("report_api")
logger.addHandler(handler)
logger.propagate = False


def configure_logging(level: str) -> logging.Logger:
    """
    Apply ``level`` to the service logger and send uvicorn's own loggers
    through the same colored handler. Safe to call once per app.
    """
    level = level.strip().upper()
    logger.setLevel(level)
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
    return logger


configure_logging(settings.LOG_LEVEL)
