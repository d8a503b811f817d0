from object_manager.shared.logger.base import Logger
from object_manager.shared.logger.console_logger import ConsoleLogger

__all__ = ["Logger", "ConsoleLogger"]
