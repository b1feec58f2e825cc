"""
webkey_core.signing.hmac_methods
--------------------------------
HMAC-SHA2 signing methods (HS256, HS384, HS512).

Verification compares digests with cryptography's HMAC.verify, which is
constant-time. A malformed signature segment is only reported after the MAC
over the signing input has been computed.
"""

from __future__ import annotations
from typing import Any, Dict, Type

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from webkey_core.errors import DecodeError, SignatureInvalidError
from webkey_core.material import RawKeyBytes
from webkey_core.signing.base import SigningMethod
from webkey_core.signing.registry import register_signing_method
from webkey_core.utils import decode_segment, encode_segment

HMAC_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "HS256": hashes.SHA256,
    "HS384": hashes.SHA384,
    "HS512": hashes.SHA512,
}


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview, RawKeyBytes)):
        return bytes(key)
    raise TypeError(f"HMAC key must be bytes, got {type(key).__name__}")


def _input_bytes(signing_input: str | bytes) -> bytes:
    if isinstance(signing_input, str):
        return signing_input.encode("utf-8")
    return bytes(signing_input)


class HMACSigningMethod(SigningMethod):
    def __init__(self, alg: str, hash_algorithm: Type[hashes.HashAlgorithm]):
        self.alg = alg
        self.hash_algorithm = hash_algorithm

    def _mac(self, signing_input: str | bytes, key: Any) -> hmac.HMAC:
        mac = hmac.HMAC(_key_bytes(key), self.hash_algorithm())
        mac.update(_input_bytes(signing_input))
        return mac

    def sign(self, signing_input: str, key: Any) -> str:
        return encode_segment(self._mac(signing_input, key).finalize())

    def verify(self, signing_input: str, signature: str, key: Any) -> None:
        mac = self._mac(signing_input, key)
        try:
            sig = decode_segment(signature)
        except DecodeError:
            mac.finalize()
            raise
        try:
            mac.verify(sig)
        except InvalidSignature as e:
            raise SignatureInvalidError() from e


def _factory(alg: str, hash_algorithm: Type[hashes.HashAlgorithm]):
    return lambda: HMACSigningMethod(alg, hash_algorithm)


for _alg, _hash in HMAC_ALGORITHMS.items():
    register_signing_method(_alg, _factory(_alg, _hash))
