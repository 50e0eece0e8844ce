"""Session configuration and replay-backed shell service and session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .replay import ReplayCommands

__all__ = [
    "COMMAND_NOT_FOUND",
    "ReplayUnsupportedError",
    "SessionConfig",
    "ReplayMultiCommandSession",
    "ReplayService",
    "new_replay_multi_command_session",
    "new_replay_service",
]

COMMAND_NOT_FOUND = "Command not found"

Listener = Callable[[str, bool], None]


class ReplayUnsupportedError(RuntimeError):
    """Raised for operations a replay cannot perform."""


@dataclass
class SessionConfig:
    """Settings of a shell session."""

    env_variables: dict[str, str] = field(default_factory=dict)
    shell: str = ""
    term: str = ""
    rows: int = 0
    columns: int = 0

    def apply_default(self) -> None:
        """Fill unset fields with their defaults."""
        if not self.shell:
            self.shell = "/bin/bash"
        if not self.term:
            self.term = "xterm"
        if self.rows == 0:
            self.rows = 100
        if self.columns == 0:
            self.columns = 100


class ReplayMultiCommandSession:
    """A multi-command session answering from recorded commands."""

    def __init__(self, shell_prompt: str, system: str, replay: ReplayCommands) -> None:
        self.shell_prompt = shell_prompt
        self.system = system
        self.replay = replay
        self.closed = False

    def run(
        self,
        command: str,
        listener: Optional[Listener] = None,
        timeout_ms: int = 0,
        *terminators: str,
    ) -> str:
        """Return the next recorded output for command."""
        if not command.endswith("\n"):
            command += "\n"
        recorded = self.replay.commands.get(command)
        if recorded is None:
            return COMMAND_NOT_FOUND
        if recorded.error:
            raise RuntimeError(recorded.error)
        return self.replay.next(command)

    def reconnect(self) -> None:
        """Replay sessions cannot reconnect; the session is left closed."""
        self.closed = True
        raise ReplayUnsupportedError("unsupported")

    def close(self) -> None:
        """Mark the session closed."""
        self.closed = True


class ReplayService:
    """A shell service backed by recorded commands and in-memory storage."""

    def __init__(
        self,
        shell_prompt: str,
        system: str,
        commands: ReplayCommands,
        storage: Optional[dict[str, bytes]] = None,
    ) -> None:
        self.shell_prompt = shell_prompt
        self.system = system
        self.commands = commands
        self.storage = storage if storage else {}
        self.tunnels: list[tuple[str, str]] = []
        self.closed = False

    def open_multi_command_session(
        self, config: Optional[SessionConfig] = None
    ) -> ReplayMultiCommandSession:
        """Open a session replaying the recorded commands."""
        return new_replay_multi_command_session(self.shell_prompt, self.system, self.commands)

    def run(self, command: str) -> None:
        """Replay command, raising its recorded error if it has one."""
        recorded = self.commands.commands.get(command)
        if recorded is not None and recorded.error:
            raise RuntimeError(recorded.error)
        self.commands.next(command)

    def upload(self, destination: str, mode: int, content: bytes) -> None:
        """Keep content under destination."""
        self.storage[destination] = content

    def download(self, source: str) -> bytes:
        """Return content kept under source."""
        try:
            return self.storage[source]
        except KeyError:
            raise FileNotFoundError("no such file or directory") from None

    def open_tunnel(self, local_address: str, remote_address: str) -> None:
        """Record the tunnel; no traffic flows in replay."""
        self.tunnels.append((local_address, remote_address))

    def reconnect(self) -> None:
        """Replay services cannot reconnect; the service is left closed."""
        self.closed = True
        raise ReplayUnsupportedError("unsupported")

    def close(self) -> None:
        """Drop recorded tunnels and mark the service closed."""
        self.tunnels.clear()
        self.closed = True


def new_replay_multi_command_session(
    shell_prompt: str, system: str, commands: ReplayCommands
) -> ReplayMultiCommandSession:
    """Create a replay session."""
    return ReplayMultiCommandSession(shell_prompt, system, commands)


def new_replay_service(
    shell_prompt: str,
    system: str,
    commands: ReplayCommands,
    storage: Optional[dict[str, bytes]] = None,
) -> ReplayService:
    """Create a replay service."""
    return ReplayService(shell_prompt, system, commands, storage)