from .algorithms import CryptoAlgorithm
from .asymmetric import CryptoKey, KeyPair, generate_key_pair

__all__ = ["CryptoAlgorithm", "CryptoKey", "KeyPair", "generate_key_pair"]
