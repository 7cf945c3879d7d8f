import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from flask import g, has_request_context, request

SERVICE_NAME = "bandtracks"

_CONTEXT_FIELDS = ("request_id", "path", "method", "remote_addr")
# Attributes every LogRecord carries; anything else came in through ``extra=``
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", *_CONTEXT_FIELDS}


def request_context() -> Dict[str, Any]:
    """Request metadata for the current Flask request, or Nones outside one."""
    if not has_request_context():
        return dict.fromkeys(_CONTEXT_FIELDS)
    return {
        "request_id": g.get("request_id"),
        "path": request.path,
        "method": request.method,
        "remote_addr": request.headers.get("X-Forwarded-For", request.remote_addr),
    }


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for field, value in request_context().items():
            setattr(record, field, value)
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, request context and extras."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({field: getattr(record, field, None) for field in _CONTEXT_FIELDS})
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _is_json_stream(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and isinstance(handler.formatter, JsonFormatter)


def configure_structured_logging(app) -> None:
    """Send root logging to stdout as JSON; repeated app creation reuses the handler."""
    root = logging.getLogger()
    level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)

    if any(_is_json_stream(handler) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestContextFilter())
    root.addHandler(handler)
