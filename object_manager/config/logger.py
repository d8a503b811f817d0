# object_manager/config/logger.py
from object_manager.config.settings import Settings
from object_manager.shared.logger.console_logger import ConsoleLogger

# Private singleton instance
_logger: ConsoleLogger | None = None


def get_logger() -> ConsoleLogger:
    """
    Return the package-wide ConsoleLogger.
    Creates it on first call (singleton pattern), named after the
    configured log name. The container falls back to it whenever no
    Logger has been registered.
    """
    global _logger
    if _logger is None:
        settings = Settings().logging
        _logger = ConsoleLogger(name=settings.name, level=settings.level, colored=settings.colored)
    return _logger
