# Standard library imports
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional


class LoggerAdapter(ABC):
    """
    Narrow logging capability consumed by services.
    
    Services depend on this interface instead of ``logging.Logger`` so tests
    can substitute a mock and assert on exact messages and arguments.
    Messages are %-style templates; arguments are passed separately and
    formatted lazily by the underlying logger.
    """
    
    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log an informational entry"""
        pass
    
    @abstractmethod
    def error(self, exception: Optional[BaseException], message: str, *args: Any) -> None:
        """Log an error entry carrying the triggering exception"""
        pass


class StandardLoggerAdapter(LoggerAdapter):
    """LoggerAdapter backed by the standard library ``logging`` module"""
    
    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
    
    @classmethod
    def for_class(cls, owner: type) -> "StandardLoggerAdapter":
        """Create an adapter logging under the owner's module name"""
        return cls(logging.getLogger(owner.__module__))
    
    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)
    
    def error(self, exception: Optional[BaseException], message: str, *args: Any) -> None:
        self._logger.error(message, *args, exc_info=exception)
