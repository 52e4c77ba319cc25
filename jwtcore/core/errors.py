"""Exception hierarchy for token encoding, decoding, and verification."""


class JWTError(Exception):
    """Base class for every error raised by jwtcore."""


class MalformedTokenError(JWTError):
    """Token structure is invalid: segment count, encoding, or JSON."""


class MalformedEncodingError(JWTError, ValueError):
    """Text is not valid canonical base64url."""


class UnsupportedAlgorithmError(JWTError):
    """Algorithm is absent, unknown, or excluded by the allow-list."""


class KeyResolutionError(JWTError):
    """The header kid is missing or not present in the supplied key map."""


class SignatureInvalidError(JWTError):
    """Signature verification failed."""


class VerificationError(JWTError):
    """The verification primitive could not run (bad key, provider error)."""


class SigningError(JWTError):
    """The signing primitive rejected the key or the operation."""


class PayloadEncodingError(JWTError):
    """Header or claims could not be serialized."""


class InvalidClaimError(JWTError):
    """A registered claim (iss, aud) does not match the expected value."""


class NotYetValidError(JWTError):
    """The token is used before its nbf time."""

    def __init__(self, nbf: float) -> None:
        super().__init__(f"token is not valid before {nbf}")
        self.nbf = nbf


class TokenExpiredError(JWTError):
    """The token is used at or after its exp time."""

    def __init__(self, exp: float) -> None:
        super().__init__(f"token expired at {exp}")
        self.exp = exp
