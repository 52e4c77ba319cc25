"""Registry of supported signing algorithms."""

from collections.abc import Iterable
from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple

from cryptography.hazmat.primitives import hashes

from jwtcore.core.errors import UnsupportedAlgorithmError


class PrimitiveFamily(StrEnum):
    """Signature primitive a registered algorithm dispatches to."""

    HMAC = "HMAC"
    RSA_PKCS1 = "RSA-PKCS1"


class DigestAlgorithm(StrEnum):
    """Hash function paired with a primitive."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return self.hash_algorithm().digest_size

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return the cryptography hash instance for this digest."""
        if self is DigestAlgorithm.SHA256:
            return hashes.SHA256()
        if self is DigestAlgorithm.SHA384:
            return hashes.SHA384()
        return hashes.SHA512()


class Algorithm(StrEnum):
    """Algorithm identifiers accepted in the JWT alg header."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"


class AlgorithmSpec(NamedTuple):
    """Primitive family and digest for one algorithm."""

    family: PrimitiveFamily
    digest: DigestAlgorithm


REGISTRY: MappingProxyType[Algorithm, AlgorithmSpec] = MappingProxyType(
    {
        Algorithm.HS256: AlgorithmSpec(PrimitiveFamily.HMAC, DigestAlgorithm.SHA256),
        Algorithm.HS384: AlgorithmSpec(PrimitiveFamily.HMAC, DigestAlgorithm.SHA384),
        Algorithm.HS512: AlgorithmSpec(PrimitiveFamily.HMAC, DigestAlgorithm.SHA512),
        Algorithm.RS256: AlgorithmSpec(
            PrimitiveFamily.RSA_PKCS1, DigestAlgorithm.SHA256
        ),
        Algorithm.RS384: AlgorithmSpec(
            PrimitiveFamily.RSA_PKCS1, DigestAlgorithm.SHA384
        ),
        Algorithm.RS512: AlgorithmSpec(
            PrimitiveFamily.RSA_PKCS1, DigestAlgorithm.SHA512
        ),
    }
)


def resolve(alg: object) -> AlgorithmSpec:
    """Look up an algorithm identifier taken from untrusted input."""
    if not isinstance(alg, str) or alg not in Algorithm.__members__:
        raise UnsupportedAlgorithmError(f"unsupported algorithm: {alg!r}")
    return REGISTRY[Algorithm(alg)]


def allowed_algorithms(names: Iterable[str] | None = None) -> frozenset[Algorithm]:
    """Intersect a caller allow-list with the registry.

    None means every registered algorithm. Unknown names are dropped.
    """
    if names is None:
        return frozenset(REGISTRY)
    if isinstance(names, str):
        names = [names]
    return frozenset(
        Algorithm(name)
        for name in names
        if isinstance(name, str) and name in Algorithm.__members__
    )
