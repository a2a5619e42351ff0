"""
Structured logging for schedule-sync

Every module obtains its logger through get_logger(__name__). Loggers are
created at import time from LOG_LEVEL / LOG_FORMAT and reconfigured by the
CLI once settings are loaded (configure_logging).
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "schedule_sync"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Extra fields promoted to the top of a JSON entry when present
IMPORT_CONTEXT_FIELDS = ("source_name", "import_id", "line_number", "rule", "mode")

JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for import logs.

    Adds timestamp, level, logger and call site, and moves import context
    fields (source, import id, line number, rule) ahead of the other extras.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["location"] = f"{record.module}:{record.funcName}"

        context = {
            field: log_record.pop(field)
            for field in IMPORT_CONTEXT_FIELDS
            if field in log_record
        }
        if context:
            log_record["context"] = context


class StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever sys.stderr is at emit time."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        # always follows sys.stderr
        pass


def resolve_level(level: str | None) -> int:
    """Map a level name (any case) to a logging level, INFO when unknown."""
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    return LOG_LEVELS.get(name, logging.INFO)


def build_formatter(format_type: str | None = None) -> logging.Formatter:
    """JSON formatter unless format_type (or LOG_FORMAT) is "text"."""
    format_type = (format_type or os.getenv("LOG_FORMAT") or "json").lower()
    if format_type == "text":
        return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return CustomJsonFormatter(fmt=JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Configure a logger with a single stderr handler.

    Stdout is left to CLI output. Calling this again replaces the handler.

    Args:
        name: Logger name
        level: Log level name (defaults to LOG_LEVEL, then INFO)
        format_type: "json" or "text" (defaults to LOG_FORMAT, then json)

    Returns:
        Configured logger instance
    """
    log_level = resolve_level(level)

    handler = StderrHandler()
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger, configuring it on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger


def configure_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Reconfigure every schedule_sync logger created so far.

    Module loggers exist before settings are known, so the CLI calls this
    after loading settings.
    """
    for name in list(logging.root.manager.loggerDict):
        if name == DEFAULT_LOGGER_NAME or name.startswith(DEFAULT_LOGGER_NAME + "."):
            setup_logger(name, level=level, format_type=format_type)


class log_operation:
    """
    Context manager logging the start, outcome and duration of a step.

    Usage:
        with log_operation("Schedule import", logger=logger, source_name="a.csv"):
            ...
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.started: float | None = None

    def _extra(self, **fields) -> dict:
        return {"operation": self.operation_name, **fields, **self.extra_fields}

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.info(f"Starting: {self.operation_name}", extra=self._extra())
        return self

    @property
    def elapsed(self) -> float:
        return round(time.perf_counter() - self.started, 3)

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name}",
                extra=self._extra(duration_seconds=self.elapsed, status="success"),
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}: {exc_val}",
                extra=self._extra(
                    duration_seconds=self.elapsed,
                    status="error",
                    error_type=exc_type.__name__,
                ),
                exc_info=True,
            )
        return False
