"""Signed JSON Web Tokens with HMAC and RSA PKCS#1 v1.5 signatures."""

from jwtcore.codec.base64url import base64url_decode, base64url_encode
from jwtcore.core.errors import (
    InvalidClaimError,
    JWTError,
    KeyResolutionError,
    MalformedEncodingError,
    MalformedTokenError,
    NotYetValidError,
    PayloadEncodingError,
    SignatureInvalidError,
    SigningError,
    TokenExpiredError,
    UnsupportedAlgorithmError,
    VerificationError,
)
from jwtcore.core.settings import DecodeOptions, TokenSettings
from jwtcore.crypto.algorithms import Algorithm, resolve
from jwtcore.crypto.keyring import KeyRing
from jwtcore.crypto.signer import sign, verify
from jwtcore.token.compact import decode, encode, get_unverified_header
from jwtcore.token.manager import TokenManager

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "DecodeOptions",
    "InvalidClaimError",
    "JWTError",
    "KeyResolutionError",
    "KeyRing",
    "MalformedEncodingError",
    "MalformedTokenError",
    "NotYetValidError",
    "PayloadEncodingError",
    "SignatureInvalidError",
    "SigningError",
    "TokenExpiredError",
    "TokenManager",
    "TokenSettings",
    "UnsupportedAlgorithmError",
    "VerificationError",
    "base64url_decode",
    "base64url_encode",
    "decode",
    "encode",
    "get_unverified_header",
    "resolve",
    "sign",
    "verify",
]
