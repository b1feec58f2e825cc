"""
webkey_core.utils
-----------------
Segment codec: base64url without padding, the form used for JWK members and
JWS signature segments. ``x5c`` array entries are plain base64 and have their
own decoder.
"""

from __future__ import annotations
import base64, binascii, hashlib, re
from .errors import DecodeError

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def encode_segment(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).decode("ascii").rstrip("=")


def decode_segment(s: str) -> bytes:
    if not isinstance(s, str):
        raise DecodeError(f"segment must be a string, got {type(s).__name__}")
    s = s.rstrip("=")
    if not _SEGMENT_RE.match(s) or len(s) % 4 == 1:
        raise DecodeError("malformed base64url segment")
    try:
        return base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"malformed base64url segment: {e}") from e


def b64d_std(s: str) -> bytes:
    # x5c entries (RFC 7517 4.7) use the standard alphabet with padding
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"malformed base64 certificate entry: {e}") from e


def thumbprint_sha1(der: bytes) -> str:
    """x5t: base64url SHA-1 of the DER certificate."""
    return encode_segment(hashlib.sha1(der).digest())


def thumbprint_sha256(der: bytes) -> str:
    """x5t#S256: base64url SHA-256 of the DER certificate."""
    return encode_segment(hashlib.sha256(der).digest())
