"""JSON detection, decoding and encoding helpers."""

from __future__ import annotations

import base64
import dataclasses
import json
from collections.abc import Mapping
from typing import Any

__all__ = [
    "AnyJSON",
    "is_structured_json",
    "is_complete_json",
    "new_line_delimited_json",
    "is_new_line_delimited_json",
    "json_to_interface",
    "json_to_map",
    "json_to_slice",
    "as_json_text",
    "as_indent_json_text",
]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)
_JSON_WHITESPACE = " \t\n\r"


class AnyJSON(str):
    """Raw JSON text of any type, decoded on demand."""

    def value(self) -> Any:
        """Decode the held JSON text."""
        return json.loads(self, parse_constant=_reject_constant)


def _parses(candidate: str | bytes) -> bool:
    try:
        json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError):
        return False
    return True


def is_structured_json(candidate: str) -> bool:
    """Return True if candidate is a valid JSON object or array."""
    candidate = candidate.strip("\n \t\r")
    if not candidate:
        return False
    curly_start, curly_end = candidate.count("{"), candidate.count("}")
    square_start, square_end = candidate.count("["), candidate.count("]")
    if curly_start != curly_end or square_start != square_end:
        return False
    if curly_start + square_start == 0:
        return False
    enclosed = (candidate.startswith("{") and candidate.endswith("}")) or (
        candidate.startswith("[") and candidate.endswith("]")
    )
    if not enclosed:
        return False
    return _parses(candidate)


def is_complete_json(candidate: str) -> bool:
    """Return True if candidate holds exactly one valid JSON value."""
    return _parses(candidate)


def _multiline_content(text: str) -> list[str]:
    text = text.strip()
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip(" \r")]


def new_line_delimited_json(candidate: str) -> list[Any]:
    """Decode every non-blank line of candidate as a JSON document."""
    return [json_to_interface(line) for line in _multiline_content(candidate)]


def is_new_line_delimited_json(candidate: str) -> bool:
    """Return True if candidate looks like newline-delimited JSON."""
    lines = _multiline_content(candidate)
    if len(lines) <= 1:
        return False
    return is_structured_json(lines[0]) and is_structured_json(lines[1])


def _read_text(source: Any) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8")
    read = getattr(source, "read", None)
    if callable(read):
        content = read()
        if isinstance(content, (bytes, bytearray)):
            return bytes(content).decode("utf-8")
        return content
    raise TypeError(f"unsupported type: {type(source).__name__}")


def _decode_first(text: str) -> Any:
    start = len(text) - len(text.lstrip(_JSON_WHITESPACE))
    value, _ = _DECODER.raw_decode(text, start)
    return value


def json_to_interface(source: Any) -> Any:
    """Decode a string, bytes or readable source into a JSON value.

    Newline-delimited JSON is decoded into a list of documents.
    """
    text = _read_text(source)
    if is_new_line_delimited_json(text):
        return new_line_delimited_json(text)
    return _decode_first(text)


def json_to_map(source: Any) -> dict[str, Any]:
    """Decode a JSON object from a string, bytes or readable source."""
    value = _decode_first(_read_text(source))
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode JSON {type(value).__name__} into a map")
    return value


def json_to_slice(source: Any) -> list[Any]:
    """Decode a JSON array from a string, bytes or readable source."""
    value = _decode_first(_read_text(source))
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"cannot decode JSON {type(value).__name__} into a slice")
    return value


def _is_struct(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_structure(value: Any) -> bool:
    return _is_struct(value) or isinstance(value, (Mapping, list, tuple))


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, AnyJSON):
        return value.value() if value else ""
    if _is_struct(value):
        return {
            field.name: _to_jsonable(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda pair: str(pair[0]))
        return {str(key): _to_jsonable(item) for key, item in items}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def as_json_text(source: Any) -> str:
    """Encode a map, sequence or dataclass as compact JSON ending in a newline."""
    if source is None:
        raise ValueError("source was nil")
    if not _is_structure(source):
        raise TypeError(f"unsupported type: {type(source).__name__}")
    text = json.dumps(
        _to_jsonable(source), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    return text + "\n"


def as_indent_json_text(source: Any) -> str:
    """Encode a map, sequence or dataclass as tab-indented JSON."""
    if source is None or not _is_structure(source):
        raise TypeError(f"unsupported type: {type(source).__name__}")
    return json.dumps(
        _to_jsonable(source), indent="\t", ensure_ascii=False, allow_nan=False
    )