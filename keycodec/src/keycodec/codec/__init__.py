"""Key codec: SubjectPublicKeyInfo stripping and PEM framing.

Exposes functional helpers plus :class:`KeyCodec`, a stateless wrapper that
works on tagged :class:`~keycodec.models.KeyBytes`.
"""
from __future__ import annotations

from ..config import CodecConfig
from ..models import KeyBytes, KeyKind, KeyShape, raw_key, wrapped_key
from .der import strip_public_key_wrapper
from .pem import decode_pem, encode_pem


class KeyCodec:
    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()

    def unwrap(self, key: KeyBytes) -> KeyBytes:
        if key.shape is KeyShape.RAW:
            return key
        return raw_key(strip_public_key_wrapper(key.data), key.kind)

    def encode(self, key: KeyBytes) -> str:
        raw = self.unwrap(key)
        return encode_pem(raw.data, raw.kind, line_length=self.config.line_length)

    def decode(self, text: str, kind: KeyKind) -> KeyBytes:
        strip = self.config.strip_public_wrapper
        data = decode_pem(text, kind, strip_wrapper=strip)
        if kind is KeyKind.PUBLIC and not strip:
            # Left for unwrap(), which passes bare keys through.
            return wrapped_key(data)
        return raw_key(data, kind)


__all__ = ["KeyCodec", "strip_public_key_wrapper", "encode_pem", "decode_pem"]
