"""Log output for the ``elapsed`` command.

Library modules only ever call ``logging.getLogger(__name__)``; nothing
here runs on import.  The command calls :func:`configure_logging` once
settings are loaded, and embedding applications may do the same.

``LoggingSettings.format`` picks between plain text lines and NDJSON
records from :class:`JsonFormatter`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from elapsed._settings import LoggingSettings

_BYTES_PER_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, one record per line.

    Keys always present: ``timestamp`` (UTC, ISO 8601), ``level``,
    ``logger``, ``message`` and ``service``.  ``version`` is added when
    one was given; ``exception`` and ``stack_info`` only when the record
    carries them.
    """

    def __init__(self, *, service: str = "", version: str = "") -> None:
        super().__init__()
        self._service = service
        self._version = version

    def _record_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        fields: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }
        if self._version:
            fields["version"] = self._version
        return fields

    def format(self, record: logging.LogRecord) -> str:
        fields = self._record_fields(record)
        if record.exc_info and record.exc_info[0] is not None:
            fields["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            fields["stack_info"] = self.formatStack(record.stack_info)
        # json.dumps escapes newlines, so tracebacks stay on one line.
        # ensure_ascii=False keeps the "μs" suffix legible.
        return json.dumps(fields, default=str, ensure_ascii=False)


def _build_formatter(
    settings: LoggingSettings, service: str, version: str
) -> logging.Formatter:
    if settings.format == "json":
        return JsonFormatter(service=service, version=version)
    return logging.Formatter(_TEXT_FORMAT)


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=settings.max_file_size_mb * _BYTES_PER_MB,
                backupCount=settings.backup_count,
                encoding="utf-8",
            )
        )
    return handlers


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
) -> None:
    """Point the root logger at stderr, plus a rotating file if configured.

    Handlers already on the root logger are dropped first, so calling
    this twice does not duplicate output.

    Args:
        settings: Level, output format and optional log file.
        service: Name stamped on JSON records.
        version: Version stamped on JSON records; left out when empty.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = _build_formatter(settings, service, version)
    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(settings.level)
