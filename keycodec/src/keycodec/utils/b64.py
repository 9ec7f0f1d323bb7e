
import base64
import binascii
import re

from .errors import InvalidParameter

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")


def b64e_wrapped(data: bytes, line_length: int = 64) -> str:
    """Standard base64 encode, wrapped at ``line_length`` with linefeeds"""
    body = base64.b64encode(data).decode("ascii")
    return "\n".join(body[i:i + line_length] for i in range(0, len(body), line_length))


def b64d_tolerant(value: str) -> bytes:
    """Standard base64 decode that ignores foreign characters and missing padding"""
    cleaned = _NON_ALPHABET.sub("", value)
    if not cleaned:
        raise InvalidParameter("No base64 payload found")
    pad = "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode((cleaned + pad).encode("ascii"), validate=True)
    except binascii.Error as exc:
        raise InvalidParameter(f"Malformed base64 payload: {exc}") from exc
