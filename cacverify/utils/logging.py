"""
Loguru setup shared by the API server and the command-line tools.
"""
import logging
import sys
from typing import Optional

from loguru import logger


class InterceptHandler(logging.Handler):
    """Route standard-library logging records (uvicorn, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Install stderr (and optionally file) sinks and intercept stdlib logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        backtrace=True,
        diagnose=False,
    )
    if log_file:
        logger.add(
            log_file,
            rotation="00:00",  # Rotate at midnight daily
            retention="30 days",
            level=level,
            format="{time:HH:mm:ss} | {level: <8} | {module}:{function}:{line} - {message}{exception}",
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO, force=True)
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "httpcore"]:
        logging.getLogger(logger_name).handlers = [InterceptHandler()]
        logging.getLogger(logger_name).propagate = False
