"""Call stack inspection helpers."""

from __future__ import annotations

import inspect
import os
from types import FrameType

__all__ = ["caller_info", "caller_directory", "discover_caller"]


def _frame_at(start: FrameType | None, index: int) -> FrameType | None:
    """Return the frame index levels up, where start is level 1."""
    frame = start
    for _ in range(max(index, 1) - 1):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def _describe(frame: FrameType) -> tuple[str, str, int]:
    name = frame.f_code.co_name
    return frame.f_code.co_filename, name[name.rfind(".") + 1 :], frame.f_lineno


def caller_info(caller_index: int) -> tuple[str, str, int]:
    """Return (filename, function name, line) of a frame on the stack.

    Index 1 is this function, 2 its caller, and so on.
    """
    current = inspect.currentframe()
    try:
        frame = _frame_at(current, caller_index)
        if frame is None:
            raise ValueError(f"no caller at stack index {caller_index}")
        return _describe(frame)
    finally:
        del current


def caller_directory(caller_index: int) -> str:
    """Return the directory, with a trailing separator, of a caller's source file."""
    filename, _, _ = caller_info(caller_index)
    head, _ = os.path.split(filename)
    return os.path.join(head, "")


def discover_caller(offset: int, max_depth: int, *ignore_files: str) -> tuple[str, str, int]:
    """Return the first caller from offset up to max_depth whose file does not end with an ignored name."""
    current = inspect.currentframe()
    found: FrameType | None = None
    try:
        for index in range(offset, max_depth):
            frame = _frame_at(current, index)
            if frame is None:
                break
            found = frame
            if ignore_files and frame.f_code.co_filename.endswith(ignore_files):
                continue
            break
        if found is None:
            raise ValueError(f"no caller between stack index {offset} and {max_depth}")
        return _describe(found)
    finally:
        del current, found