"""Token issuance and verification for a single issuer."""

import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from jwtcore.core.errors import InvalidClaimError, JWTError
from jwtcore.core.settings import TokenSettings
from jwtcore.crypto.algorithms import Algorithm, PrimitiveFamily, resolve
from jwtcore.crypto.keyring import KeyRing
from jwtcore.crypto.types import DecodedToken, TokenClaims
from jwtcore.token.compact import decode, encode

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({"iss", "sub", "aud", "iat", "nbf", "exp", "scope"})


class TokenManager:
    """Creates and verifies tokens signed by a key ring or a shared secret.

    Pass keyring for RS* signing with rotation support, or secret (and kid)
    for HS* signing.
    """

    def __init__(
        self,
        issuer: str,
        keyring: KeyRing | None = None,
        *,
        secret: str | bytes | None = None,
        kid: str = "default",
        algorithm: Algorithm | None = None,
        settings: TokenSettings | None = None,
    ) -> None:
        if (keyring is None) == (secret is None):
            raise ValueError("exactly one of keyring or secret is required")
        if keyring is not None:
            algorithm = algorithm or keyring.active.algorithm
            expected = PrimitiveFamily.RSA_PKCS1
        else:
            algorithm = algorithm or Algorithm.HS256
            expected = PrimitiveFamily.HMAC
        if resolve(algorithm).family is not expected:
            raise ValueError(f"{algorithm} cannot be used with this key type")
        self._issuer = issuer
        self._keyring = keyring
        self._secret = secret
        self._kid = kid
        self._algorithm = Algorithm(algorithm)
        self._settings = settings or TokenSettings()

    @property
    def algorithm(self) -> Algorithm:
        """Algorithm every token from this manager is signed with."""
        return self._algorithm

    def _signing_key(self) -> tuple[object, str]:
        if self._keyring is not None:
            active = self._keyring.active
            return active.private_key_pem, active.kid
        return self._secret, self._kid

    def _verification_keys(self) -> Mapping[str, object]:
        if self._keyring is not None:
            return self._keyring.verification_keys()
        return {self._kid: self._secret}

    def create_token(self, claims: TokenClaims, now: float | None = None) -> str:
        """Create a signed token carrying iss, sub, iat, nbf and exp."""
        issued_at = int(time.time() if now is None else now)
        ttl = claims.ttl_seconds or self._settings.access_token_ttl
        clashing = RESERVED_CLAIMS.intersection(claims.extra)
        if clashing:
            raise ValueError(f"extra claims override registered ones: {sorted(clashing)}")
        payload: dict[str, Any] = {
            "iss": self._issuer,
            "sub": claims.sub,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": issued_at + ttl,
        }
        if claims.aud is not None:
            payload["aud"] = claims.aud
        if claims.scope:
            payload["scope"] = claims.scope
        payload.update(claims.extra)
        key, kid = self._signing_key()
        return encode(payload, key, self._algorithm, extra_header={"kid": kid})

    def verify_token(
        self, token: str, audience: str | None = None, now: float | None = None
    ) -> DecodedToken:
        """Verify a token from this issuer and return its claims."""
        try:
            raw = decode(
                token,
                self._verification_keys(),
                allowed_algs=[self._algorithm],
                options=self._settings.decode_options(),
                now=now,
            )
            if not isinstance(raw, dict):
                raise InvalidClaimError("claims must be a JSON object")
            if raw.get("iss") != self._issuer:
                raise InvalidClaimError("issuer mismatch")
            if audience is not None:
                aud = raw.get("aud")
                audiences = aud if isinstance(aud, list) else [aud]
                if audience not in audiences:
                    raise InvalidClaimError("audience mismatch")
            try:
                return DecodedToken.model_validate(raw)
            except ValidationError as exc:
                raise InvalidClaimError(f"claims have invalid types: {exc}") from exc
        except JWTError as exc:
            logger.debug("rejected token: %s", type(exc).__name__)
            raise
