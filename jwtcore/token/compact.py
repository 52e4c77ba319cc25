"""Compact JWT serialization: encode and decode header.payload.signature."""

import time
from collections.abc import Iterable, Mapping
from typing import Any

from jwtcore.codec import json_codec
from jwtcore.codec.base64url import base64url_decode, base64url_encode
from jwtcore.core.errors import (
    KeyResolutionError,
    MalformedEncodingError,
    MalformedTokenError,
    PayloadEncodingError,
    SignatureInvalidError,
    UnsupportedAlgorithmError,
    VerificationError,
)
from jwtcore.core.settings import DecodeOptions
from jwtcore.crypto.algorithms import Algorithm, allowed_algorithms, resolve
from jwtcore.crypto.signer import sign, verify
from jwtcore.token.claims import validate_time_claims

RESERVED_HEADER_FIELDS = ("typ", "alg")


def _build_header(alg: str, extra_header: Mapping[str, Any] | None) -> dict[str, Any]:
    header: dict[str, Any] = {"typ": "JWT", "alg": alg}
    for name, value in (extra_header or {}).items():
        if not isinstance(name, str):
            raise PayloadEncodingError(f"header field names must be strings: {name!r}")
        if name in RESERVED_HEADER_FIELDS:
            if value != header[name]:
                raise PayloadEncodingError(f"header field {name!r} cannot be overridden")
            continue
        header[name] = value
    return header


def _serialize(value: Any, part: str) -> str:
    try:
        return base64url_encode(json_codec.serialize(value))
    except (TypeError, ValueError, RecursionError) as exc:
        raise PayloadEncodingError(f"{part} JSON encoding failed: {exc}") from exc


def encode(
    claims: Any,
    key: object,
    alg: str = Algorithm.HS256,
    extra_header: Mapping[str, Any] | None = None,
) -> str:
    """Serialize claims and sign them into a compact token."""
    resolve(alg)
    header = _build_header(str(alg), extra_header)
    segments = [_serialize(header, "header"), _serialize(claims, "payload")]
    signing_input = ".".join(segments).encode("ascii")
    segments.append(base64url_encode(sign(signing_input, key, alg)))
    return ".".join(segments)


def _split(token: str | bytes, options: DecodeOptions) -> list[str]:
    if isinstance(token, bytes):
        token = token.decode("ascii", errors="replace")
    if not isinstance(token, str):
        raise MalformedTokenError(f"token must be str, got {type(token).__name__}")
    if not token.isascii():
        raise MalformedTokenError("token is not ascii")
    if len(token) > options.max_token_length:
        raise MalformedTokenError(
            f"token exceeds {options.max_token_length} characters"
        )
    segments = token.split(".")
    if len(segments) != 3:
        raise MalformedTokenError("token must have exactly three segments")
    return segments


def _load_segment(segment: str, part: str, options: DecodeOptions) -> Any:
    try:
        return json_codec.deserialize(
            base64url_decode(segment), max_depth=options.max_json_depth
        )
    except ValueError as exc:
        raise MalformedTokenError(f"invalid {part} segment: {exc}") from exc


def _load_header(segment: str, options: DecodeOptions) -> dict[str, Any]:
    header = _load_segment(segment, "header", options)
    if not isinstance(header, dict) or not header:
        raise MalformedTokenError("header must be a non-empty JSON object")
    return header


def get_unverified_header(
    token: str | bytes, options: DecodeOptions | None = None
) -> dict[str, Any]:
    """Return the token header without verifying anything."""
    options = options or DecodeOptions()
    return _load_header(_split(token, options)[0], options)


def _resolve_key(key: object, header: Mapping[str, Any]) -> object:
    if not isinstance(key, Mapping):
        return key
    kid = header.get("kid")
    if not isinstance(kid, str):
        raise KeyResolutionError("header kid is required to select a key")
    if kid not in key:
        raise KeyResolutionError(f"no key for kid {kid!r}")
    return key[kid]


def decode(
    token: str | bytes,
    key: object,
    allowed_algs: Iterable[str] | None = None,
    *,
    options: DecodeOptions | None = None,
    now: float | None = None,
) -> Any:
    """Verify a compact token and return its claims.

    key is either a single key or a mapping of kid to key. The signature is
    checked before the payload is parsed, and nbf/exp are checked against a
    single time sample.
    """
    options = options or DecodeOptions()
    header_seg, payload_seg, signature_seg = _split(token, options)
    header = _load_header(header_seg, options)

    alg = header.get("alg")
    resolve(alg)
    if alg not in allowed_algorithms(allowed_algs):
        raise UnsupportedAlgorithmError(f"algorithm {alg!r} is not allowed")

    resolved_key = _resolve_key(key, header)

    try:
        signature = base64url_decode(signature_seg)
    except MalformedEncodingError as exc:
        raise MalformedTokenError(f"invalid signature segment: {exc}") from exc

    signing_input = f"{header_seg}.{payload_seg}".encode("ascii")
    try:
        valid = verify(signing_input, signature, resolved_key, alg)
    except VerificationError as exc:
        raise SignatureInvalidError(f"signature verification failed: {exc}") from exc
    if not valid:
        raise SignatureInvalidError("signature verification failed")

    claims = _load_segment(payload_seg, "payload", options)
    validate_time_claims(
        claims, time.time() if now is None else now, options.leeway
    )
    return claims
