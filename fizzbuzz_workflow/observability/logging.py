from __future__ import annotations

import json
import logging
import sys
from typing import Any

from .context import snapshot

_RESERVED = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in record.__dict__.items():
        if k in _RESERVED or k.startswith("_"):
            continue
        out[k] = v
    return out


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(snapshot())

        for k, v in _extra_fields(record).items():
            try:
                json.dumps(v)
                payload[k] = v
            except TypeError:
                payload[k] = repr(v)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Human-readable `level logger: message k=v ...` lines."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        fields = {**snapshot(), **_extra_fields(record)}
        line = f"{record.levelname} {record.name}: {record.getMessage()}"
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class KVLogger:
    """A tiny structured logging adapter: keyword arguments become `extra` fields."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def info(self, msg: str, *args: object, **kwargs: object) -> None:
        self._log("info", msg, *args, **kwargs)

    def warning(self, msg: str, *args: object, **kwargs: object) -> None:
        self._log("warning", msg, *args, **kwargs)

    def _log(self, level: str, msg: str, *args: object, **kwargs: object) -> None:
        exc_info = kwargs.pop("exc_info", None)
        log_fn = getattr(self._logger, level)
        log_fn(msg, *args, extra=dict(kwargs), exc_info=exc_info)


def configure_logging(*, level: str = "WARNING", json_output: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call multiple times; the previous handlers are replaced.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter() if json_output else KeyValueFormatter())

    root.handlers.clear()
    root.addHandler(handler)


def get_logger(name: str = "fizzbuzz") -> KVLogger:
    return KVLogger(logging.getLogger(name))
