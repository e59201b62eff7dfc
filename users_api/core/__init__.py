from .config import Settings, get_settings
from .logger_adapter import LoggerAdapter, StandardLoggerAdapter
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "LoggerAdapter",
    "StandardLoggerAdapter",
    "setup_logging",
]
