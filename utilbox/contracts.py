"""Shared constants and small data contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

__all__ = [
    "JSON_MIME_TYPE",
    "CSV_MIME_TYPE",
    "TSV_MIME_TYPE",
    "TEXT_MIME_TYPE",
    "FILE_EXTENSION_MIME_TYPE",
    "LogMessage",
    "LogMessages",
    "Ranger",
]

JSON_MIME_TYPE = "text/json"
CSV_MIME_TYPE = "text/csv"
TSV_MIME_TYPE = "text/tsv"
TEXT_MIME_TYPE = "text/sql"

FILE_EXTENSION_MIME_TYPE: dict[str, str] = {
    "json": JSON_MIME_TYPE,
    "csv": CSV_MIME_TYPE,
    "tsv": TSV_MIME_TYPE,
    "sql": TEXT_MIME_TYPE,
    "html": "text/html",
    "js": "text/javascript",
    "jpg": "image/jpeg",
    "png": "image/png",
}


@dataclass
class LogMessage:
    """A typed log message."""

    message_type: str = ""
    message: Any = None


@dataclass
class LogMessages:
    """A collection of log messages."""

    messages: list[LogMessage] = field(default_factory=list)


@runtime_checkable
class Ranger(Protocol):
    """Something whose items can be visited one by one."""

    def range(self, handler: Callable[[Any], bool]) -> None:
        """Call handler with each item until it returns False; errors propagate."""
        ...