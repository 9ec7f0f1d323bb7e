
from __future__ import annotations

from .b64 import b64d_tolerant, b64e_wrapped
from .errors import (
    AuthFailed,
    CryptoError,
    DataDecodeError,
    DuplicateKey,
    InteractionNotAllowed,
    InvalidParameter,
    KeychainUnavailable,
    KeyNotFound,
    MemoryAllocationFailed,
    UnimplementedFunction,
    error_from_status,
)

__all__ = [
    "b64e_wrapped",
    "b64d_tolerant",
    "CryptoError",
    "UnimplementedFunction",
    "InvalidParameter",
    "MemoryAllocationFailed",
    "KeychainUnavailable",
    "AuthFailed",
    "DuplicateKey",
    "KeyNotFound",
    "InteractionNotAllowed",
    "DataDecodeError",
    "error_from_status",
]
