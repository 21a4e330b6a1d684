"""Logging infrastructure with run context."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


class RunContextFilter(logging.Filter):
    """Add the current input source to log records."""

    def __init__(self):
        super().__init__()
        self.source: Optional[str] = None

    def filter(self, record):
        """Add source to record."""
        record.source = self.source or "system"
        return True


class SalesReportLogger:
    """Centralized logging manager."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_file: Optional[Path] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 30
    ):
        self.log_file = log_file
        self.run_filter = RunContextFilter()

        # Configure package logger
        self.logger = logging.getLogger("salesreport")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Remove existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [source:%(source)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        # Console handler on stderr; stdout carries the report summaries
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(self.run_filter)
        self.logger.addHandler(console_handler)

        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8"
                )
            except OSError as e:
                self.log_file = None
                self.logger.warning(f"File logging disabled, cannot open {log_file}: {e}")
            else:
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(formatter)
                file_handler.addFilter(self.run_filter)
                self.logger.addHandler(file_handler)

    def set_run_context(self, source: Optional[str]):
        """Set current input source for logging."""
        self.run_filter.source = source

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[SalesReportLogger] = None


def _build_logger(log_level: Optional[str] = None) -> SalesReportLogger:
    """Create a logger from the application settings."""
    # Imported here: config.settings depends on utils.exceptions
    from salesreport.config.settings import get_settings
    from salesreport.utils.exceptions import ConfigError

    try:
        settings = get_settings()
    except ConfigError:
        return SalesReportLogger(log_level or "INFO")

    return SalesReportLogger(
        log_level or settings.log_level,
        log_file=settings.log_path if settings.log_to_file else None,
        max_bytes=settings.log_max_file_size_mb * 1024 * 1024,
        backup_count=settings.log_backup_count
    )


def get_logger(log_level: Optional[str] = None) -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = _build_logger(log_level)
    return _logger_instance.get_logger()


def configure_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Rebuild the global logger, e.g. after settings were reloaded."""
    global _logger_instance
    _logger_instance = _build_logger(log_level)
    return _logger_instance.get_logger()


def set_run_context(source: Optional[str]):
    """Set input source context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_run_context(source)
