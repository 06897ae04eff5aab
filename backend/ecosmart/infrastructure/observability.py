"""Structured Logging — per-request user binding and JSON output.

Invariants:
    - Every record carries user_id: an explicit extra={"user_id": ...} wins,
      otherwise the id bound for the current request, otherwise None
    - JSON lines carry timestamp, level, logger, message plus the footprint
      fields (user_id, category, error_code, ...) that are set
    - setup_logging is idempotent: re-running it replaces its own handler

Design Decisions:
    - ContextVar binding: the X-User-Id dependency binds once per request and
      every log line below it (services, repositories) is attributed without
      threading user_id through each call
"""

import json
import logging
from contextvars import ContextVar, Token
from datetime import datetime, timezone

_current_user: ContextVar[str | None] = ContextVar("current_user", default=None)

_EXTRA_FIELDS = (
    "user_id", "category", "error_code", "path", "attempt",
    "input_tokens", "output_tokens", "analyzer",
)

_HANDLER_NAME = "ecosmart"


def bind_user(user_id: str | None) -> Token:
    """Attribute subsequent log records in this context to user_id."""
    return _current_user.set(user_id)


def unbind_user(token: Token) -> None:
    _current_user.reset(token)


class UserContextFilter(logging.Filter):
    """Stamp the bound user id onto records that did not pass one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "user_id", None) is None:
            record.user_id = _current_user.get()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key] for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the ecosmart handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.addFilter(UserContextFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [user=%(user_id)s] %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
