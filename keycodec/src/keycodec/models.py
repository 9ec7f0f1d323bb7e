"""Shared value types for key material."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .utils.errors import InvalidParameter


class KeyKind(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    @property
    def label(self) -> str:
        """PEM label including the surrounding spaces, e.g. ``" PUBLIC "``."""
        return f" {self.value} "


class KeyShape(str, Enum):
    RAW = "RAW"
    WRAPPED = "WRAPPED"


@dataclass(frozen=True, slots=True)
class KeyBytes:
    """DER-encoded key octets tagged with their kind and shape.

    ``WRAPPED`` keys carry a SubjectPublicKeyInfo envelope and are only valid
    for public keys; ``RAW`` keys are what a provider's raw import expects
    (PKCS#1 for RSA).
    """

    data: bytes
    kind: KeyKind
    shape: KeyShape = KeyShape.RAW

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.shape is KeyShape.WRAPPED and self.kind is not KeyKind.PUBLIC:
            raise InvalidParameter("Only public keys can carry a SubjectPublicKeyInfo wrapper")

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_wrapped(self) -> bool:
        return self.shape is KeyShape.WRAPPED


def raw_key(data: bytes, kind: KeyKind) -> KeyBytes:
    return KeyBytes(data, kind, KeyShape.RAW)


def wrapped_key(data: bytes) -> KeyBytes:
    return KeyBytes(data, KeyKind.PUBLIC, KeyShape.WRAPPED)


__all__ = ["KeyKind", "KeyShape", "KeyBytes", "raw_key", "wrapped_key"]
