"""Recorded shell conversations that can be stored, loaded and replayed."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .fs import create_dir_if_not_exist, file_exists

__all__ = ["ReplayCommand", "ReplayCommands", "new_replay_commands"]

_STDIN_EXT = ".stdin"
_STDOUT_EXT = ".stdout"
_STDIN_SUFFIX = "_000" + _STDIN_EXT
_MAX_ENTRIES = 1000
_DIR_MODE = 0o744


@dataclass
class ReplayCommand:
    """One stdin together with the stdout fragments it produced, in order."""

    stdin: str
    index: int = 0
    stdout: list[str] = field(default_factory=list)
    error: str = ""


@dataclass
class ReplayCommands:
    """Replay commands keyed by their stdin, kept in registration order."""

    base_dir: str
    commands: dict[str, ReplayCommand] = field(default_factory=dict)
    keys: list[str] = field(default_factory=list)

    def register(self, stdin: str, stdout: str) -> None:
        """Record stdout as the next response to stdin."""
        command = self.commands.get(stdin)
        if command is None:
            command = self.commands[stdin] = ReplayCommand(stdin=stdin)
            self.keys.append(stdin)
        command.stdout.append(stdout)

    def next(self, stdin: str) -> str:
        """Return the next recorded stdout for stdin, or "" once exhausted."""
        try:
            command = self.commands[stdin]
        except KeyError:
            raise KeyError(f"no replay command registered for: {stdin!r}") from None
        if command.index < len(command.stdout):
            value = command.stdout[command.index]
            command.index += 1
            return value
        return ""

    @staticmethod
    def _check_target(target: Any) -> None:
        if not (hasattr(target, "replay_commands") and hasattr(target, "record_session")):
            raise TypeError(f"unsupported type: {type(target).__name__}")

    def enable(self, target: Any) -> None:
        """Make target record its session into these commands."""
        self._check_target(target)
        target.replay_commands = self
        target.record_session = True

    def disable(self, target: Any) -> None:
        """Stop target recording its session."""
        self._check_target(target)
        target.replay_commands = None
        target.record_session = False

    def store(self) -> None:
        """Write every command as NNN_000.stdin and NNN_MMM.stdout files in the base directory."""
        create_dir_if_not_exist(self.base_dir)
        for number, key in enumerate(self.keys, 1):
            command = self.commands[key]
            prefix = os.path.join(self.base_dir, f"{number:03d}")
            Path(prefix + _STDIN_SUFFIX).write_text(command.stdin, encoding="utf-8")
            for position, stdout in enumerate(command.stdout, 1):
                Path(f"{prefix}_{position:03d}{_STDOUT_EXT}").write_text(stdout, encoding="utf-8")

    def load(self) -> None:
        """Register the commands stored in the base directory."""
        names = sorted(os.listdir(self.base_dir))[:_MAX_ENTRIES]
        if not names:
            raise EOFError(f"no entries in {self.base_dir}")
        stdin_map: dict[str, str] = {}
        stdout_map: dict[str, str] = {}
        for name in names:
            ext = os.path.splitext(name)[1]
            if ext == _STDIN_EXT:
                target = stdin_map
            elif ext == _STDOUT_EXT:
                target = stdout_map
            else:
                continue
            try:
                target[name] = Path(self.base_dir, name).read_text(encoding="utf-8")
            except OSError:
                return
        candidate_keys = sorted(stdout_map)
        for key in sorted(stdin_map):
            prefix = key[: -len(_STDIN_SUFFIX)]
            for candidate in candidate_keys:
                if candidate.startswith(prefix):
                    self.register(stdin_map[key], stdout_map[candidate])

    def shell(self) -> str:
        """Return the shell prompt recorded in response to a PS1= command, or ""."""
        for command in self.commands.values():
            if command.stdin.startswith("PS1=") and command.stdout:
                return command.stdout[0]
        return ""

    def system(self) -> str:
        """Return the lower-cased system name recorded for uname -s, or ""."""
        for command in self.commands.values():
            if command.stdin.startswith("uname -s") and command.stdout:
                return command.stdout[0].lower()
        return ""


def new_replay_commands(basedir: str) -> ReplayCommands:
    """Create empty replay commands, creating basedir if it does not exist."""
    if not file_exists(basedir):
        os.makedirs(basedir, _DIR_MODE)
    return ReplayCommands(base_dir=basedir)