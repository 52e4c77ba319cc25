"""Signature creation and verification dispatched on the algorithm registry.

The registry entry for the requested algorithm alone selects the code path.
Key material is only interpreted after that choice has been made, and a key
that does not fit the selected family is an error rather than a reason to
switch families.
"""

import hashlib
import hmac

from cryptography import exceptions as crypto_exceptions
from cryptography.hazmat.primitives.asymmetric import padding

from jwtcore.core.errors import SigningError, VerificationError
from jwtcore.crypto.algorithms import AlgorithmSpec, PrimitiveFamily, resolve
from jwtcore.crypto.keys import load_private_key, load_public_key

_ASYMMETRIC_KEY_MARKERS = (
    b"-----BEGIN ",
    b"ssh-rsa ",
    b"ssh-ed25519 ",
    b"ecdsa-sha2-",
)
_KEY_ERRORS = (TypeError, ValueError, crypto_exceptions.UnsupportedAlgorithm)


def _hmac_key(key: object) -> bytes:
    """Return the raw HMAC secret, refusing asymmetric key material."""
    if isinstance(key, str):
        raw = key.encode("utf-8")
    elif isinstance(key, bytes | bytearray | memoryview):
        raw = bytes(key)
    else:
        raise TypeError(f"HMAC key must be str or bytes, got {type(key).__name__}")
    stripped = raw.lstrip()
    if any(stripped.startswith(marker) for marker in _ASYMMETRIC_KEY_MARKERS):
        raise ValueError("asymmetric key material cannot be used as an HMAC secret")
    return raw


def _hmac_digest(message: bytes, key: object, spec: AlgorithmSpec) -> bytes:
    return hmac.new(_hmac_key(key), message, getattr(hashlib, spec.digest)).digest()


def sign(message: bytes, key: object, alg: str) -> bytes:
    """Sign message with key under alg and return the raw signature."""
    spec = resolve(alg)
    if spec.family is PrimitiveFamily.HMAC:
        try:
            return _hmac_digest(message, key, spec)
        except (TypeError, ValueError) as exc:
            raise SigningError(str(exc)) from exc
    if spec.family is PrimitiveFamily.RSA_PKCS1:
        try:
            private_key = load_private_key(key)
            return private_key.sign(
                message, padding.PKCS1v15(), spec.digest.hash_algorithm()
            )
        except _KEY_ERRORS as exc:
            raise SigningError(f"unable to sign with {alg}: {exc}") from exc
    raise SigningError(f"no signing primitive for {spec.family}")


def verify(message: bytes, signature: bytes, key: object, alg: str) -> bool:
    """Check signature over message.

    Returns False for a signature that does not match. Raises
    VerificationError when the primitive cannot run at all, for example
    because the key is malformed or belongs to another family.
    """
    spec = resolve(alg)
    if spec.family is PrimitiveFamily.HMAC:
        try:
            expected = _hmac_digest(message, key, spec)
        except (TypeError, ValueError) as exc:
            raise VerificationError(str(exc)) from exc
        return hmac.compare_digest(expected, signature)
    if spec.family is PrimitiveFamily.RSA_PKCS1:
        try:
            public_key = load_public_key(key)
        except _KEY_ERRORS as exc:
            raise VerificationError(f"unusable {alg} key: {exc}") from exc
        if len(signature) != (public_key.key_size + 7) // 8:
            return False
        try:
            public_key.verify(
                signature, message, padding.PKCS1v15(), spec.digest.hash_algorithm()
            )
        except crypto_exceptions.InvalidSignature:
            return False
        except _KEY_ERRORS as exc:
            raise VerificationError(f"{alg} verification failed: {exc}") from exc
        return True
    raise VerificationError(f"no verification primitive for {spec.family}")
