"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler.
Log format includes the timestamp, logger name, log level and message.
Logging is set up exactly once, even if the application factory runs
several times (as it does under tests).
"""

# Standard library imports
import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.
    
    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
            Unknown names fall back to INFO.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)
