"""
Logging setup of idcloak commands, stdlib logging routed to loguru.

Library modules only log through logging.getLogger(__name__);
configure_logging is called once by the CLI entrypoint.
"""
import sys
import logging

from loguru import logger as loguru_logger


LOG_FORMAT = "%(levelname)1.1s %(asctime)s %(name)s:%(lineno)-4d %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGURU_LOG_FORMAT = (
    "<level>{level:1.1s}</level> "
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
    "<cyan>{name}:{line:<4d}</cyan> <level>{message}</level>"
)

LOGURU_HANDLER = {
    "sink": sys.stderr,
    "colorize": True,
    "format": LOGURU_LOG_FORMAT,
    "diagnose": False,
    "backtrace": False,
}


class InterceptHandler(logging.Handler):
    """
    Route stdlib logging records to loguru:
        https://github.com/Delgan/loguru/issues/78
    """

    def emit(self, record):
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger_opt = loguru_logger.opt(depth=depth, exception=record.exc_info)
        logger_opt.log(level, record.getMessage())


def configure_logging(level=logging.INFO, enable_loguru=True):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if enable_loguru:
        logging.basicConfig(
            handlers=[InterceptHandler()], level=level,
            format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        loguru_logger.configure(handlers=[dict(LOGURU_HANDLER, level=level)])
    else:
        logging.basicConfig(
            level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
