# object_manager/shared/logger/console_logger.py
import logging
import traceback
from datetime import datetime, timezone
from typing import Dict, Optional

import structlog
from colorama import Fore, Style

from object_manager.config.settings import LoggingSettings
from object_manager.shared.logger.base import Logger


class ConsoleLogger(Logger):
    """Console logger built on structlog, one colored line per message."""

    _logger_cache: Dict[str, structlog.stdlib.BoundLogger] = {}

    METHOD_LEVELS = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "exception": logging.ERROR,
        "critical": logging.CRITICAL,
    }

    LEVEL_COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA,
    }

    def __init__(
        self,
        name: Optional[str] = None,
        level: Optional[str] = None,
        colored: Optional[bool] = None,
    ):
        settings = LoggingSettings()
        self.name = name or settings.name
        self.level = (level or settings.level).upper()
        self.colored = settings.colored if colored is None else colored

        cache_key = f"{self.name}:{self.level}:{self.colored}"
        if cache_key in self._logger_cache:
            self._console = self._logger_cache[cache_key]
            return

        threshold = getattr(logging, self.level, logging.INFO)

        # ----------------------------
        # Level filter
        # ----------------------------
        # loggers sharing a name share the stdlib logger, so each one filters
        # on its own level instead of calling setLevel on the shared one
        def level_filter(logger, method_name, event_dict):
            if self.METHOD_LEVELS.get(method_name, logging.INFO) < threshold:
                raise structlog.DropEvent
            return event_dict

        # ----------------------------
        # Console processor
        # ----------------------------
        def console_processor(logger, method_name, event_dict):
            ts = event_dict.get("timestamp") or datetime.now(timezone.utc).isoformat()
            level = event_dict.get("level", method_name).upper()
            msg = event_dict.get("event", "")
            line = f"{ts} [{self.name}] {level}: {msg}"
            if not self.colored:
                return line
            color = self.LEVEL_COLORS.get(level, Fore.WHITE)
            return f"{color}{line}{Style.RESET_ALL}"

        stdlib_logger = logging.getLogger(self.name)
        stdlib_logger.setLevel(logging.DEBUG)
        if not stdlib_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            stdlib_logger.addHandler(handler)

        self._console = structlog.wrap_logger(
            stdlib_logger,
            processors=[
                level_filter,
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                console_processor,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self._logger_cache[cache_key] = self._console

    # ----------------------------
    # Logger capability
    # ----------------------------
    def log(self, message: str) -> None:
        self._console.info(message)

    def log_exception(self, message: str, error: BaseException) -> None:
        trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self._console.error(f"{type(error).__name__}: {message}\n{trace.rstrip()}")

    # ----------------------------
    # Leveled helpers
    # ----------------------------
    def debug(self, msg: str):
        self._console.debug(msg)

    def info(self, msg: str):
        self._console.info(msg)

    def warning(self, msg: str):
        self._console.warning(msg)

    def error(self, msg: str):
        self._console.error(msg)
