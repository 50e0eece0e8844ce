"""File system helpers."""

from __future__ import annotations

import os

__all__ = ["remove_file_if_exist", "file_exists", "is_directory", "create_dir_if_not_exist"]

_DIR_MODE = 0o744


def file_exists(filename: str) -> bool:
    """Return True if filename exists."""
    return os.path.exists(filename)


def is_directory(location: str) -> bool:
    """Return True if location is a directory."""
    return os.path.isdir(location)


def remove_file_if_exist(*filenames: str) -> None:
    """Remove each existing file or empty directory; missing ones are skipped."""
    for filename in filenames:
        if not file_exists(filename):
            continue
        if os.path.isdir(filename) and not os.path.islink(filename):
            os.rmdir(filename)
        else:
            os.remove(filename)


def create_dir_if_not_exist(*dirs: str) -> None:
    """Create each directory, along with missing parents."""
    for directory in dirs:
        if len(directory) > 1 and directory.endswith("/"):
            directory = directory[:-1]
        parent = directory[: directory.rfind("/") + 1]
        if parent and parent != "/" and parent != directory:
            try:
                create_dir_if_not_exist(parent)
            except OSError:
                pass
        if not file_exists(directory):
            try:
                os.mkdir(directory, _DIR_MODE)
            except OSError as err:
                raise OSError(f"failed to create dir {directory} {err}") from err