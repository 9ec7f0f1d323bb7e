from __future__ import annotations

from typing import Dict, Type


class CryptoError(Exception):
    """Base exception for keycodec, carrying the platform status code"""

    code: int = 0
    text: str = "Unknown error"

    def __init__(self, detail: str | None = None, *, code: int | None = None) -> None:
        if code is not None:
            self.code = code
        self.detail = detail
        super().__init__(self.description)

    @property
    def description(self) -> str:
        message = f"CryptoError ({self.code}): {self.text}."
        if self.detail:
            message = f"{message} {self.detail}"
        return message

    def __str__(self) -> str:
        return self.description


class UnimplementedFunction(CryptoError):
    """Raised when the function or operation is not implemented"""

    code = -4
    text = "The function or operation is not implemented"


class InvalidParameter(CryptoError):
    """Raised when one or more parameters passed to a function were not valid"""

    code = -50
    text = "One or more parameters passed to a function were not valid"


class MemoryAllocationFailed(CryptoError):
    code = -108
    text = "Failed to allocate memory"


class KeychainUnavailable(CryptoError):
    code = -25291
    text = "No keychain is available"


class AuthFailed(CryptoError):
    code = -25293
    text = "Authorization or authentication failed"


class DuplicateKey(CryptoError):
    code = -25299
    text = "An item with the same primary key attributes already exists"


class KeyNotFound(CryptoError):
    code = -25300
    text = "The item cannot be found"


class InteractionNotAllowed(CryptoError):
    code = -25308
    text = (
        "Interaction with the user is required in order to grant access or process a request; "
        "however, user interaction with the Security Server has been disabled by the program"
    )


class DataDecodeError(CryptoError):
    """Raised when key bytes cannot be parsed by the crypto provider"""

    code = -26275
    text = "Unable to decode the provided data"


_BY_STATUS: Dict[int, Type[CryptoError]] = {
    cls.code: cls
    for cls in (
        UnimplementedFunction,
        InvalidParameter,
        MemoryAllocationFailed,
        KeychainUnavailable,
        AuthFailed,
        DuplicateKey,
        KeyNotFound,
        InteractionNotAllowed,
        DataDecodeError,
    )
}


def error_from_status(status: int, detail: str | None = None) -> CryptoError:
    """Map a provider status code onto the matching exception instance"""
    cls = _BY_STATUS.get(status)
    if cls is None:
        return CryptoError(detail, code=status)
    return cls(detail)


__all__ = [
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
