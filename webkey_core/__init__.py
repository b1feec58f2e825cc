"""
webkey_core
===========
Key-set resolution and pluggable token signing.

Provides:
- WebKey / WebKeySet: published key records, decoded from a stream or fetched
- Key extraction: n/e → RSA public key, x5c → certificate bytes, x5u → fetched bytes
- resolve(): pick the record named by a token's kid and extract its key
- Signing method registry with HMAC-SHA2 methods registered on import
"""

from .errors import (
    DecodeError,
    FetchCancelledError,
    FetchError,
    MissingKeyError,
    MissingKidError,
    NoKeyStrategyError,
    SignatureInvalidError,
    TransportError,
    UnsupportedAlgorithmError,
    WebKeyError,
)
from .keyset import WebKeySet
from .material import KeyMaterial, RawKeyBytes, RSAPublicKey
from .resolver import HeaderToken, Token, resolve
from .signing import (
    SigningMethod,
    get_signing_method,
    register_signing_method,
    require_signing_method,
)
from .utils import decode_segment, encode_segment
from .webkey import KeyStrategy, WebKey
