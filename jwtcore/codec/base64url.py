"""URL-safe base64 without padding, as used by every JWT segment."""

import base64
import binascii

from jwtcore.core.errors import MalformedEncodingError


def base64url_encode(data: bytes) -> str:
    """Encode bytes as base64url and strip the trailing padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str | bytes) -> bytes:
    """Decode base64url text, restoring padding first.

    Only canonical encodings are accepted: characters outside the URL-safe
    alphabet, wrong explicit padding, and non-zero trailing bits all raise
    MalformedEncodingError, so two different texts never decode to the same
    bytes.
    """
    if isinstance(data, str):
        try:
            raw = data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise MalformedEncodingError("non-ascii character in base64url") from exc
    else:
        raw = bytes(data)

    stripped = raw.rstrip(b"=")
    padding = -len(stripped) % 4
    if padding == 3:
        raise MalformedEncodingError("invalid base64url length")
    if len(raw) != len(stripped) and len(raw) - len(stripped) != padding:
        raise MalformedEncodingError("invalid base64url padding")

    try:
        decoded = base64.b64decode(
            stripped + b"=" * padding, altchars=b"-_", validate=True
        )
    except binascii.Error as exc:
        raise MalformedEncodingError(str(exc)) from exc

    # altchars still lets "+" and "/" through, and trailing bits are ignored
    if base64url_encode(decoded).encode("ascii") != stripped:
        raise MalformedEncodingError("non-canonical base64url")
    return decoded
