"""SubjectPublicKeyInfo stripping for RSA public keys.

Providers export RSA public keys as::

    SEQUENCE {
        SEQUENCE { OID rsaEncryption, NULL }   -- AlgorithmIdentifier
        BIT STRING { 0x00, RSAPublicKey }
    }

while a raw import expects the bare PKCS#1 ``RSAPublicKey``. The walk below is
best effort: any mismatch returns the input untouched, so already-bare keys
pass through unchanged and callers cannot tell them apart from malformed ones.
"""
from __future__ import annotations

from typing import Optional

from ..logging import get_logger

SEQUENCE = 0x30
INTEGER = 0x02
BIT_STRING = 0x03
LONG_FORM = 0x80

# Encoded rsaEncryption AlgorithmIdentifier: 30 0D 06 09 <9 OID bytes> 05 00.
# Only valid for RSA.
ALGORITHM_IDENTIFIER_SIZE = 15

log = get_logger("keycodec.der")


def _skip_length(data: bytes, index: int) -> Optional[int]:
    """Return the offset just past the length field at ``index``."""
    if index >= len(data):
        return None
    length = data[index]
    if length > LONG_FORM:
        return index + (length - LONG_FORM) + 1
    return index + 1


def _byte_at(data: bytes, index: Optional[int]) -> Optional[int]:
    if index is None or index >= len(data):
        return None
    return data[index]


def strip_public_key_wrapper(data: bytes) -> bytes:
    """Remove the SubjectPublicKeyInfo envelope around an RSA public key.

    Returns ``data`` unchanged when it is already a bare key or does not
    have the expected shape. Never raises.
    """
    if _byte_at(data, 0) != SEQUENCE:
        return _passthrough(data, "not a sequence")

    index = _skip_length(data, 1)
    tag = _byte_at(data, index)
    if tag == INTEGER:
        return _passthrough(data, "already bare")
    if tag != SEQUENCE:
        return _passthrough(data, "no algorithm identifier")

    index += ALGORITHM_IDENTIFIER_SIZE
    if _byte_at(data, index) != BIT_STRING:
        return _passthrough(data, "no bit string")

    index = _skip_length(data, index + 1)
    if _byte_at(data, index) != 0x00:
        return _passthrough(data, "unexpected unused-bits count")

    return bytes(data[index + 1:])


def _passthrough(data: bytes, reason: str) -> bytes:
    log.debug("public key left unchanged", reason=reason, size=len(data))
    return data


__all__ = ["strip_public_key_wrapper", "ALGORITHM_IDENTIFIER_SIZE"]
