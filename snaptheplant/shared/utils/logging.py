# 📄 File: snaptheplant/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the app's diary: every message says which request and which user it belongs to,
# so when something goes wrong with someone's plants or payment we can follow what happened.

# 🧪 Purpose (Technical Summary):
# Root logger configuration (JSON through python-json-logger, or plain text), a logging
# Filter that stamps request/user ids from context variables onto every record, and a
# StructuredLogger wrapper whose keyword arguments become record fields, plus audit helpers.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging, contextvars

# 🔄 Connected Modules / Calls From:
# Used by: snaptheplant.main (setup), request middleware (context), domain services
# (audit and business events), external API clients

import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
user_id_var: ContextVar[str] = ContextVar("user_id", default="")

SERVICE_NAME = "snaptheplant-api"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"

# keyword arguments the stdlib logger understands itself
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

# chatty third-party loggers
_QUIET_LOGGERS = ("aiohttp", "asyncio", "stripe", "urllib3", "python_http_client")


class RequestContextFilter(logging.Filter):
    """Stamps service, host, request id and user id onto every record."""

    def __init__(self):
        super().__init__()
        self.hostname = socket.gethostname()

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        return True


class JSONFormatter(JsonFormatter):
    """One JSON object per line, with stable key names for log shipping."""

    def __init__(self):
        super().__init__(
            JSON_FIELDS,
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["module"] = record.module
        log_record["line"] = record.lineno
        # empty context ids are noise
        for key in ("request_id", "user_id"):
            if not log_record.get(key):
                log_record.pop(key, None)


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    ``logger.info("Plant created", plant_id=7)`` logs the message with a
    ``plant_id`` field; the JSON formatter renders it at the top level.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def log(self, level: int, message: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
        passthrough = {k: fields.pop(k) for k in list(fields) if k in _LOGGING_KWARGS}
        record_fields = {**(extra or {}), **fields}
        if record_fields:
            passthrough["extra"] = record_fields
        self.logger.log(level, message, **passthrough)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
        self.log(logging.DEBUG, message, extra, **fields)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
        self.log(logging.INFO, message, extra, **fields)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
        self.log(logging.WARNING, message, extra, **fields)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
        self.log(logging.ERROR, message, extra, **fields)

    def log_user_action(
        self,
        action: str,
        user_id: Any,
        resource: Optional[str] = None,
        result: str = "success",
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Audit trail entry for something a user (or admin) did."""
        target = f" on {resource}" if resource else ""
        self.info(
            f"User {user_id} performed {action}{target}",
            extra=extra,
            event_type="user_action",
            action=action,
            actor_id=str(user_id),
            resource=resource,
            result=result,
        )

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: Any = None,
        entity_type: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Subscription changes, sweep results and similar domain events."""
        self.info(
            description,
            extra=extra,
            event_type="business_event",
            business_event_type=event_type,
            entity_id=str(entity_id) if entity_id is not None else None,
            entity_type=entity_type,
        )


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the process.

    Existing root handlers are replaced, so building several applications in
    one process (tests) does not duplicate output.

    Args:
        log_level: Minimum level name
        log_format: ``json`` or ``text``
        log_file: Optional file that receives the same records as stdout
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = JSONFormatter() if log_format.lower() == "json" else logging.Formatter(TEXT_FORMAT)
    context_filter = RequestContextFilter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(level)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@lru_cache(maxsize=None)
def get_logger(name: str) -> StructuredLogger:
    """Structured logger for a module (usually ``__name__``)."""
    return StructuredLogger(name)


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a request id (generated when omitted) and user id for the enclosed block.

    Yields:
        str: The bound request id
    """
    request_id = request_id or str(uuid4())
    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or "")
    try:
        yield request_id
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)
