# vendor_ai/core/logging.py
import logging
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s.%(msecs)03d %(levelname)-8s [%(name)s]%(reset)s %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# The SDK logs every request/response; keep that out of our stream
QUIET_LOGGERS = ("httpx", "httpcore", "openai")
# uvicorn follows the app level
SERVER_LOGGERS = ("uvicorn.error", "uvicorn.access")


def configure_logging(level=logging.INFO, quiet=QUIET_LOGGERS):
    """Single colored stdout handler on the root logger (replaces any existing ones)."""
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return handler
