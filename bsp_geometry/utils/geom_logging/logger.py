"""
Logging Infrastructure for bsp_geometry

Every module of the package logs through a logger obtained from
get_logger(). Records are printed with the package prefix stripped from the
logger name, so a merge logged by ``bsp_geometry.geometry.partitioning.region_factory``
shows up as ``partitioning.region_factory``.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import colorlog

if TYPE_CHECKING:
    from bsp_geometry.config.core import LoggingConfig

PACKAGE_PREFIXES = ("bsp_geometry.geometry.", "bsp_geometry.")

_FORMAT = "%(asctime)s - %(component)-28s - %(levelname)-8s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def component_name(logger_name: str) -> str:
    """Logger name without the package prefix."""
    for prefix in PACKAGE_PREFIXES:
        if logger_name.startswith(prefix):
            return logger_name[len(prefix) :]
    return logger_name


class GeometryFormatter(colorlog.ColoredFormatter):
    """
    colorlog formatter printing the component name of each record.

    Args:
        use_colors: Color the records by level
        include_location: Append ``[file:line]`` to each record
    """

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        fmt = "%(log_color)s" + _FORMAT
        if include_location:
            fmt += " [%(filename)s:%(lineno)d]"
        super().__init__(fmt, datefmt=_DATE_FORMAT, log_colors=_LOG_COLORS, no_color=not use_colors)
        self.use_colors = use_colors
        self.include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        record.component = component_name(record.name)
        return super().format(record)


@dataclass(frozen=True)
class _Settings:
    level: int = logging.INFO
    use_colors: bool = True
    include_location: bool = False
    log_file_path: Path | None = None


class GeometryLogger:
    """
    Singleton owning the handlers of every bsp_geometry logger.

    Reconfiguring replaces the handlers of the loggers already handed out,
    so modules can keep the logger they fetched at import time.
    """

    _instance = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _settings: ClassVar[_Settings] = _Settings()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Configure global logging settings for bsp_geometry.

        Args:
            level: Logging level name or value
            log_to_file: Also write records to a file
            log_file_path: Target file, a timestamped file under ./logs when None
            use_colors: Color console output
            include_location: Include file location in log messages
        """
        if isinstance(level, str):
            level = getattr(logging, level.upper())

        path = None
        if log_to_file:
            path = Path(log_file_path) if log_file_path is not None else cls._default_log_file()
            path.parent.mkdir(parents=True, exist_ok=True)

        with cls._lock:
            cls._settings = replace(
                cls._settings,
                level=level,
                use_colors=use_colors,
                include_location=include_location,
                log_file_path=path,
            )
            for logger in cls._loggers.values():
                cls._attach_handlers(logger)

    @staticmethod
    def _default_log_file() -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return Path.cwd() / "logs" / f"bsp_geometry_{timestamp}.log"

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get or create the logger of a module.

        Loggers that already carry handlers set up elsewhere are registered
        but left untouched.
        """
        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                logger = logging.getLogger(name)
                if not logger.handlers:
                    cls._attach_handlers(logger)
                cls._loggers[name] = logger
        return logger

    @classmethod
    def _attach_handlers(cls, logger: logging.Logger):
        settings = cls._settings
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(settings.level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            GeometryFormatter(use_colors=settings.use_colors, include_location=settings.include_location)
        )
        logger.addHandler(console_handler)

        if settings.log_file_path is not None:
            file_handler = logging.FileHandler(settings.log_file_path)
            file_handler.setFormatter(GeometryFormatter(use_colors=False, include_location=settings.include_location))
            logger.addHandler(file_handler)

        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name, the calling module name when None
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        caller = frame.f_back if frame else None
        name = caller.f_globals.get("__name__", "bsp_geometry") if caller else "bsp_geometry"

    return GeometryLogger.get_logger(name)


def configure_logging(**kwargs):
    """Configure global logging settings, see GeometryLogger.configure()."""
    GeometryLogger.configure(**kwargs)


def configure_from_config(config: LoggingConfig):
    """Apply the logging section of a GeometryConfig."""
    configure_logging(
        level=config.level,
        log_to_file=config.log_to_file,
        log_file_path=config.log_file_path,
        use_colors=config.use_colors,
        include_location=config.include_location,
    )


def log_validation_error(logger: logging.Logger, component: str, error_msg: str, suggestion: str | None = None):
    """Log validation errors with suggestions."""
    logger.error(f"Validation error in {component}: {error_msg}")
    if suggestion:
        logger.info(f"Suggestion: {suggestion}")


class LoggedOperation:
    """
    Context manager timing a region operation.

    Failures are logged as errors and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation_name: str, log_level: int = logging.DEBUG):
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.start_time = 0.0

    def __enter__(self):
        self.logger.log(self.log_level, f"Starting {self.operation_name}")
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.log(self.log_level, f"Completed {self.operation_name} in {duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation_name} after {duration:.3f}s: {exc_val}")
        return False
