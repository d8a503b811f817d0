# object_manager/shared/logger/base.py
from abc import ABC, abstractmethod


class Logger(ABC):
    """
    Logging capability consumed by the container and the demo payloads.
    Bind a concrete implementation with ``bind(Logger, ConsoleLogger)`` or
    register a ready instance with ``bind_instance(Logger, ...)``.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Write a single informational line."""
        pass

    @abstractmethod
    def log_exception(self, message: str, error: BaseException) -> None:
        """
        Report a failure.

        Args:
            message: Human readable description of what went wrong.
            error: The exception being reported; its traceback is included.
        """
        pass
