"""Key management service contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "Resource",
    "EncryptRequest",
    "EncryptResponse",
    "DecryptRequest",
    "DecryptResponse",
    "KmsService",
]


@dataclass
class Resource:
    """Data to process, given inline, by URL or by parameter name."""

    url: str = ""
    parameter: str = ""
    data: bytes = b""


@dataclass
class EncryptRequest:
    """A request to encrypt a resource with a key."""

    key: str = ""
    resource: Resource | None = None
    target_url: str = ""

    def validate(self) -> None:
        """Raise ValueError if the request lacks a key or a resource."""
        if not self.key:
            raise ValueError("key was empty")
        if self.resource is None:
            raise ValueError("nothing to encrypt")


@dataclass
class EncryptResponse:
    """Encrypted data and its text form."""

    encrypted_data: bytes = b""
    encrypted_text: str = ""


@dataclass
class DecryptRequest:
    """A request to decrypt a resource with a key."""

    key: str = ""
    resource: Resource | None = None

    def validate(self) -> None:
        """Raise ValueError if the request lacks a key or a resource."""
        if not self.key:
            raise ValueError("key was empty")
        if self.resource is None:
            raise ValueError("nothing to decrypt")


@dataclass
class DecryptResponse:
    """Decrypted data and its text form."""

    data: bytes = b""
    text: str = ""


class KmsService(ABC):
    """A service that encrypts and decrypts resources."""

    @abstractmethod
    def encrypt(self, request: EncryptRequest) -> EncryptResponse:
        """Encrypt the request's resource."""

    @abstractmethod
    def decrypt(self, request: DecryptRequest) -> DecryptResponse:
        """Decrypt the request's resource."""

    def decode(
        self,
        request: DecryptRequest,
        decoder: Callable[[bytes], Any],
        target: Any = None,
    ) -> Any:
        """Decrypt, decode the data, and fill target with the result.

        With no target the decoded value is returned; a mapping or list target
        is filled in place, any other target gets matching attributes set.
        """
        value = decoder(self.decrypt(request).data)
        if target is None:
            return value
        if isinstance(target, MutableMapping):
            target.update(value)
        elif isinstance(target, list):
            target[:] = value
        else:
            for name, item in dict(value).items():
                if hasattr(target, name):
                    setattr(target, name, item)
        return target