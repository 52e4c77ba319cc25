"""RSA key generation and loading, HMAC secret generation."""

import secrets

import uuid_utils
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from jwtcore.crypto.algorithms import Algorithm, PrimitiveFamily, resolve
from jwtcore.crypto.types import SigningKeyData

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


def generate_rsa_keypair(
    algorithm: Algorithm = Algorithm.RS256, key_size: int = RSA_KEY_SIZE
) -> SigningKeyData:
    """Generate a new RSA keypair for signing with an RS* algorithm."""
    if resolve(algorithm).family is not PrimitiveFamily.RSA_PKCS1:
        raise ValueError(f"{algorithm} is not an RSA algorithm")
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=key_size,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    kid = str(uuid_utils.uuid7())
    return SigningKeyData(
        kid=kid,
        algorithm=algorithm,
        private_key_pem=private_pem,
        public_key_pem=public_pem,
    )


def generate_hmac_secret(algorithm: Algorithm = Algorithm.HS256) -> bytes:
    """Generate a random HMAC secret as long as the algorithm's digest."""
    spec = resolve(algorithm)
    if spec.family is not PrimitiveFamily.HMAC:
        raise ValueError(f"{algorithm} is not an HMAC algorithm")
    return secrets.token_bytes(spec.digest.digest_size)


def _as_bytes(pem: str | bytes) -> bytes:
    if isinstance(pem, str):
        return pem.encode()
    if isinstance(pem, bytes | bytearray | memoryview):
        return bytes(pem)
    raise TypeError(f"expected PEM text or an RSA key, got {type(pem).__name__}")


def load_private_key(key: object) -> RSAPrivateKey:
    """Load an RSA private key from PEM, or pass a loaded one through."""
    if isinstance(key, RSAPrivateKey):
        return key
    loaded = serialization.load_pem_private_key(_as_bytes(key), password=None)
    if not isinstance(loaded, RSAPrivateKey):
        raise TypeError(f"expected an RSA private key, got {type(loaded).__name__}")
    return loaded


def load_public_key(key: object) -> RSAPublicKey:
    """Load an RSA public key.

    Accepts a public key PEM, a private key PEM (reduced to its public half),
    or a loaded RSA key object.
    """
    if isinstance(key, RSAPublicKey):
        return key
    if isinstance(key, RSAPrivateKey):
        return key.public_key()
    raw = _as_bytes(key)
    if b"PRIVATE KEY-----" in raw:
        return load_private_key(raw).public_key()
    loaded = serialization.load_pem_public_key(raw)
    if not isinstance(loaded, RSAPublicKey):
        raise TypeError(f"expected an RSA public key, got {type(loaded).__name__}")
    return loaded
