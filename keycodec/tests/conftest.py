import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from keycodec.logging import configure_logging

configure_logging("warning")


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)
