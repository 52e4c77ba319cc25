"""Signing key rotation with lock-free reads."""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from jwtcore.crypto.algorithms import PrimitiveFamily, resolve
from jwtcore.crypto.keys import load_public_key
from jwtcore.crypto.types import SigningKeyData

logger = logging.getLogger(__name__)


def _require_rsa(key: SigningKeyData) -> None:
    if resolve(key.algorithm).family is not PrimitiveFamily.RSA_PKCS1:
        raise ValueError(f"{key.algorithm} is not an RSA algorithm")


class KeyRing:
    """The active signing key plus every key still accepted for verification.

    Writers serialize on a lock and publish a fresh read-only mapping;
    readers only dereference the current snapshot.
    """

    def __init__(self, active: SigningKeyData) -> None:
        _require_rsa(active)
        self._lock = threading.Lock()
        self._active = active
        self._public_keys: Mapping[str, RSAPublicKey] = MappingProxyType(
            {active.kid: load_public_key(active.public_key_pem)}
        )

    @property
    def active(self) -> SigningKeyData:
        """Key used to sign new tokens."""
        return self._active

    def verification_keys(self) -> Mapping[str, RSAPublicKey]:
        """Current kid to public key snapshot, usable as a decode key map."""
        return self._public_keys

    def rotate(self, new_key: SigningKeyData) -> None:
        """Make new_key the signer, keeping earlier keys verifiable."""
        _require_rsa(new_key)
        public_key = load_public_key(new_key.public_key_pem)
        with self._lock:
            if new_key.algorithm != self._active.algorithm:
                raise ValueError(
                    f"key ring signs with {self._active.algorithm}, got {new_key.algorithm}"
                )
            if new_key.kid in self._public_keys:
                raise ValueError(f"kid {new_key.kid!r} is already in the key ring")
            keys = dict(self._public_keys)
            keys[new_key.kid] = public_key
            self._public_keys = MappingProxyType(keys)
            self._active = new_key
        logger.info("rotated signing key to kid=%s", new_key.kid)

    def retire(self, kid: str) -> None:
        """Stop accepting tokens signed with kid."""
        with self._lock:
            if kid == self._active.kid:
                raise ValueError("the active signing key cannot be retired")
            if kid not in self._public_keys:
                raise KeyError(kid)
            keys = dict(self._public_keys)
            del keys[kid]
            self._public_keys = MappingProxyType(keys)
        logger.info("retired signing key kid=%s", kid)
