# Asymmetric algorithms available for key pair generation.
from __future__ import annotations

from enum import Enum

from ..utils.errors import UnimplementedFunction


class CryptoAlgorithm(str, Enum):
    RSA2048 = "rsa2048"

    @property
    def key_type(self) -> str:
        return "RSA"

    @property
    def key_size(self) -> int:
        return 2048

    @classmethod
    def from_name(cls, name: "str | CryptoAlgorithm") -> "CryptoAlgorithm":
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnimplementedFunction(f"Unsupported algorithm: {name}")


__all__ = ["CryptoAlgorithm"]
