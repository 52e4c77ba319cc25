"""Type definitions for signing keys and token claims."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from jwtcore.crypto.algorithms import Algorithm


class SigningKeyData(BaseModel):
    """An RSA keypair for JWT signing, identified by kid."""

    model_config = ConfigDict(frozen=True)

    kid: str
    algorithm: Algorithm = Algorithm.RS256
    private_key_pem: str
    public_key_pem: str


class TokenClaims(BaseModel):
    """Claims bundle for token creation."""

    sub: str
    aud: str | None = None
    scope: str = ""
    extra: dict[str, Any] = {}
    ttl_seconds: int | None = None


class DecodedToken(BaseModel):
    """Verified token claims."""

    model_config = ConfigDict(extra="allow")

    sub: str = ""
    iss: str = ""
    aud: str | list[str] | None = None
    scope: str = ""
    iat: float | None = None
    nbf: float | None = None
    exp: float | None = None
