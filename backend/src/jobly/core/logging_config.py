"""
Structured Logging Configuration
Loguru sinks with standard logging interception
"""
import sys
import logging
from typing import Optional

from loguru import logger

from .config import Settings, settings as default_settings


HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
PLAIN_FORMAT = "{time} | {level} | {name}:{function}:{line} | {message}"


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure Loguru logging"""
    config = config or default_settings

    # Remove default logger
    logger.remove()

    # Add console logger
    if config.LOG_JSON_FORMAT and config.ENVIRONMENT == "production":
        # JSON format for production
        logger.add(
            sys.stdout,
            format=PLAIN_FORMAT,
            level=config.LOG_LEVEL,
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            format=HUMAN_FORMAT,
            level=config.LOG_LEVEL,
            colorize=True,
        )

    # Add file logger
    if config.LOG_FILE_PATH:
        logger.add(
            config.LOG_FILE_PATH,
            rotation="00:00",  # Rotate daily
            retention="30 days",
            level=config.LOG_LEVEL,
            format=PLAIN_FORMAT if config.LOG_JSON_FORMAT else HUMAN_FORMAT,
            serialize=config.LOG_JSON_FORMAT,
        )

    # Intercept standard logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Intercept sqlalchemy and asyncpg logs
    for logger_name in ["sqlalchemy.engine", "sqlalchemy.pool", "asyncpg"]:
        logging.getLogger(logger_name).handlers = [InterceptHandler()]

    logger.info(f"Logging configured: level={config.LOG_LEVEL}, json={config.LOG_JSON_FORMAT}")
