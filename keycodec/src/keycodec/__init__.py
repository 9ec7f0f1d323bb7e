"""keycodec: RSA key wrapping, PEM framing and key helpers."""
from .codec import KeyCodec, decode_pem, encode_pem, strip_public_key_wrapper
from .crypto import CryptoAlgorithm, CryptoKey, KeyPair, generate_key_pair
from .models import KeyBytes, KeyKind, KeyShape, raw_key, wrapped_key
from .utils.errors import CryptoError, DataDecodeError, InvalidParameter, UnimplementedFunction

__version__ = "0.1.0"

__all__ = [
    "KeyCodec",
    "strip_public_key_wrapper",
    "encode_pem",
    "decode_pem",
    "CryptoAlgorithm",
    "CryptoKey",
    "KeyPair",
    "generate_key_pair",
    "KeyBytes",
    "KeyKind",
    "KeyShape",
    "raw_key",
    "wrapped_key",
    "CryptoError",
    "DataDecodeError",
    "InvalidParameter",
    "UnimplementedFunction",
]
