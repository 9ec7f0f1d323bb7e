"""RSA key objects backed by ``cryptography``.

Functional helper :func:`generate_key_pair` plus :class:`CryptoKey`, a thin
wrapper exposing a key's raw bytes, attributes and PEM text, and rebuilding
keys from raw bytes or PEM.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Dict

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..codec.pem import decode_pem, encode_pem
from ..config import KeyGenConfig
from ..logging import get_logger
from ..models import KeyBytes, KeyKind, raw_key
from ..utils.errors import (
    DataDecodeError,
    InvalidParameter,
    MemoryAllocationFailed,
    UnimplementedFunction,
)
from .algorithms import CryptoAlgorithm

log = get_logger("keycodec.keys")


class CryptoKey:
    """Immutable wrapper around an RSA public or private key."""

    __slots__ = ("_key", "_algorithm", "_kind")

    def __init__(self, key: Any, algorithm: CryptoAlgorithm = CryptoAlgorithm.RSA2048) -> None:
        if isinstance(key, rsa.RSAPrivateKey):
            kind = KeyKind.PRIVATE
        elif isinstance(key, rsa.RSAPublicKey):
            kind = KeyKind.PUBLIC
        else:
            raise InvalidParameter(f"Unsupported key object: {type(key).__name__}")
        self._key = key
        self._algorithm = algorithm
        self._kind = kind

    @property
    def key(self) -> Any:
        return self._key

    @property
    def algorithm(self) -> CryptoAlgorithm:
        return self._algorithm

    @property
    def kind(self) -> KeyKind:
        return self._kind

    @property
    def is_public(self) -> bool:
        return self._kind is KeyKind.PUBLIC

    @property
    def key_size(self) -> int:
        return self._key.key_size

    @property
    def data(self) -> bytes:
        """Raw key bytes: PKCS#1 ``RSAPublicKey`` or ``RSAPrivateKey`` DER."""
        if self.is_public:
            return self._key.public_bytes(
                encoding=serialization.Encoding.DER,
                format=serialization.PublicFormat.PKCS1,
            )
        return self._key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def key_bytes(self) -> KeyBytes:
        return raw_key(self.data, self._kind)

    @property
    def attributes(self) -> Dict[str, Any]:
        """Key item attributes, as a keychain reports them for RSA keys."""
        public = self.is_public
        return {
            "key_class": self._kind.value.lower(),
            "key_type": self._algorithm.key_type,
            "key_size_in_bits": self.key_size,
            "effective_key_size": self.key_size,
            "application_label": hashlib.sha1(self.public_key().data).hexdigest(),
            "public_exponent": self._public_numbers().e,
            "can_encrypt": public,
            "can_decrypt": not public,
            "can_sign": not public,
            "can_verify": public,
            "can_wrap": public,
            "can_unwrap": not public,
            "can_derive": False,
        }

    @property
    def pem(self) -> str:
        return encode_pem(self.data, self._kind)

    def public_key(self) -> "CryptoKey":
        if self.is_public:
            return self
        return CryptoKey(self._key.public_key(), self._algorithm)

    def _public_numbers(self) -> rsa.RSAPublicNumbers:
        if self.is_public:
            return self._key.public_numbers()
        return self._key.private_numbers().public_numbers

    # Creating from sources
    @classmethod
    def from_data(
        cls, data: bytes, algorithm: CryptoAlgorithm = CryptoAlgorithm.RSA2048, is_public: bool = True
    ) -> "CryptoKey":
        """Build a key from DER bytes (PKCS#1, SubjectPublicKeyInfo or PKCS#8)."""
        algorithm = CryptoAlgorithm.from_name(algorithm)
        try:
            if is_public:
                key = serialization.load_der_public_key(bytes(data))
            else:
                key = serialization.load_der_private_key(bytes(data), password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise DataDecodeError(str(exc) or None) from exc

        expected = rsa.RSAPublicKey if is_public else rsa.RSAPrivateKey
        if not isinstance(key, expected):
            raise DataDecodeError(f"Expected an {algorithm.key_type} key, got {type(key).__name__}")
        if key.key_size != algorithm.key_size:
            raise InvalidParameter(
                f"{algorithm.value} expects {algorithm.key_size}-bit keys, got {key.key_size} bits"
            )
        return cls(key, algorithm)

    @classmethod
    def from_pem(
        cls, pem: str, algorithm: CryptoAlgorithm = CryptoAlgorithm.RSA2048, is_public: bool = True
    ) -> "CryptoKey":
        kind = KeyKind.PUBLIC if is_public else KeyKind.PRIVATE
        return cls.from_data(decode_pem(pem, kind), algorithm, is_public)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CryptoKey):
            return NotImplemented
        return self._kind is other._kind and self.data == other.data

    def __hash__(self) -> int:
        return hash((self._kind, self.data))

    def __repr__(self) -> str:
        return f"CryptoKey(kind={self._kind.value}, algorithm={self._algorithm.value}, bits={self.key_size})"


@dataclass(frozen=True, slots=True)
class KeyPair:
    public_key: CryptoKey
    private_key: CryptoKey

    def __iter__(self):
        return iter((self.public_key, self.private_key))


def generate_key_pair(
    algorithm: "CryptoAlgorithm | str | None" = None, config: KeyGenConfig | None = None
) -> KeyPair:
    """Generate an asymmetric key pair for ``algorithm``.

    Falls back to the algorithm named in ``config`` (``rsa2048`` by default).
    """
    cfg = config or KeyGenConfig()
    resolved = CryptoAlgorithm.from_name(algorithm if algorithm is not None else cfg.algorithm)
    if resolved.key_type != "RSA":
        raise UnimplementedFunction(f"No generator for {resolved.value}")

    try:
        private = rsa.generate_private_key(public_exponent=cfg.public_exponent, key_size=resolved.key_size)
    except ValueError as exc:
        raise InvalidParameter(str(exc)) from exc
    except UnsupportedAlgorithm as exc:
        raise UnimplementedFunction(str(exc)) from exc
    except MemoryError as exc:
        raise MemoryAllocationFailed() from exc

    log.info("key pair generated", algorithm=resolved.value, bits=resolved.key_size)
    return KeyPair(
        public_key=CryptoKey(private.public_key(), resolved),
        private_key=CryptoKey(private, resolved),
    )


__all__ = ["CryptoKey", "KeyPair", "generate_key_pair"]
