"""Secret keys, secret values and interactive credential reading."""

from __future__ import annotations

import getpass
import threading
from typing import Any

__all__ = [
    "READING_CREDENTIAL_TIMEOUT",
    "SecretKey",
    "Secret",
    "new_secrets",
    "read_user_and_password",
]

READING_CREDENTIAL_TIMEOUT = 45.0


class SecretKey(str):
    """A secret key; keys starting with * or # are static, others dynamic."""

    def is_dynamic(self) -> bool:
        """Return True unless the key starts with * or #."""
        return not (self.startswith("*") or self.startswith("#"))

    def secret(self, credentials: Any) -> str:
        """Return the username, password or data of credentials that this key selects."""
        if self.startswith("#") or self.endswith(".username}") or self.endswith(".Username}"):
            return credentials.username
        if credentials.password:
            return credentials.password
        return credentials.data


class Secret(str):
    """A secret value or a location of one."""

    def is_location(self) -> bool:
        """Return True if the secret holds none of the characters of an inline value."""
        return not any(char in self for char in "{}[]=+()@#^&*|")


def new_secrets(secrets: dict[str, str] | None) -> dict[SecretKey, Secret]:
    """Wrap a plain mapping as secret keys and secrets."""
    return {SecretKey(key): Secret(value) for key, value in (secrets or {}).items()}


def read_user_and_password(timeout: float = READING_CREDENTIAL_TIMEOUT) -> tuple[str, str]:
    """Prompt for a username and a password typed twice, within timeout seconds."""
    outcome: dict[str, Any] = {}

    def reader() -> None:
        try:
            user = input("Enter Username: ")
            first = getpass.getpass("Enter Password: ")
            second = getpass.getpass("Retype Password: ")
            if first != second:
                raise ValueError("password did not match")
            outcome["value"] = (user.strip(), first.strip())
        except BaseException as err:  # handed to the calling thread
            outcome["error"] = err

    thread = threading.Thread(target=reader, daemon=True)
    thread.start()
    thread.join(timeout)
    if thread.is_alive():
        raise TimeoutError("reading credential timeout")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]