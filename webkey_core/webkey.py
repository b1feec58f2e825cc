"""
webkey_core.webkey
------------------
The published key record (one element of a JWKS ``keys`` array) and the
classification of which extraction strategy applies to it.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING
import threading

from .errors import DecodeError
from .utils import thumbprint_sha1, thumbprint_sha256

if TYPE_CHECKING:
    from .material import KeyMaterial
    from .transport import BaseFetcher


class KeyStrategy(Enum):
    MODULUS_AND_EXPONENT = "modulus_and_exponent"
    CERTIFICATE_PEM = "certificate_pem"
    CERTIFICATE_URL = "certificate_url"
    UNKNOWN = "unknown"


# attribute name -> published member name
FIELD_NAMES = {
    "kty": "kty",
    "use": "use",
    "key_ops": "key-ops",
    "alg": "alg",
    "kid": "kid",
    "x5u": "x5u",
    "x5c": "x5c",
    "x5t": "x5t",
    "x5t_s256": "x5t#S256",
    "n": "n",
    "e": "e",
}


@dataclass(frozen=True)
class WebKey:
    """
    One published key, values kept exactly as published.

    ``x5c_std`` is set when x5c arrived in RFC 7517 array form; the stored
    value is then the first (leaf) entry, which uses standard base64.
    """
    kty: str = ""
    use: str = ""
    key_ops: str = ""
    alg: str = ""
    kid: str = ""
    x5u: str = ""
    x5c: str = ""
    x5t: str = ""
    x5t_s256: str = ""
    n: str = ""
    e: str = ""
    x5c_std: bool = False

    @property
    def strategy(self) -> KeyStrategy:
        if self.e and self.n:
            return KeyStrategy.MODULUS_AND_EXPONENT
        if self.x5c:
            return KeyStrategy.CERTIFICATE_PEM
        if self.x5u:
            return KeyStrategy.CERTIFICATE_URL
        return KeyStrategy.UNKNOWN

    def thumbprint_matches(self, der) -> bool:
        """
        True when every published thumbprint (x5t, x5t#S256) matches ``der``.
        A record that publishes neither never matches.
        """
        der = bytes(der)
        if not (self.x5t or self.x5t_s256):
            return False
        if self.x5t and self.x5t != thumbprint_sha1(der):
            return False
        if self.x5t_s256 and self.x5t_s256 != thumbprint_sha256(der):
            return False
        return True

    def key(
        self,
        fetcher: Optional["BaseFetcher"] = None,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> "KeyMaterial":
        """Turn this record into key material using its strategy."""
        from .strategies import extract_key
        return extract_key(self, fetcher=fetcher, timeout=timeout, cancel=cancel)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, member in FIELD_NAMES.items():
            value = getattr(self, attr)
            if not value:
                continue
            out[member] = [value] if attr == "x5c" and self.x5c_std else value
        return out

    @classmethod
    def from_dict(cls, data: Mapping) -> "WebKey":
        if not isinstance(data, Mapping):
            raise DecodeError(f"key record must be an object, got {type(data).__name__}")

        values: Dict[str, Any] = {}
        for attr, member in FIELD_NAMES.items():
            value = data.get(member)
            if value is None:
                value = ""
            if attr == "x5c" and isinstance(value, list):
                if value and not isinstance(value[0], str):
                    raise DecodeError("x5c entries must be strings")
                values["x5c_std"] = bool(value)
                value = value[0] if value else ""
            if not isinstance(value, str):
                raise DecodeError(f"key member {member!r} must be a string, got {type(value).__name__}")
            values[attr] = value
        return cls(**values)
