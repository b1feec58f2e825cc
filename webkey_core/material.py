# webkey_core/material.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives.asymmetric import rsa

from .webkey import KeyStrategy


@dataclass(frozen=True)
class RSAPublicKey:
    """Public key rebuilt from a record's ``n``/``e`` members."""
    modulus: int
    exponent: int

    def to_cryptography(self) -> rsa.RSAPublicKey:
        return rsa.RSAPublicNumbers(self.exponent, self.modulus).public_key()


@dataclass(frozen=True)
class RawKeyBytes:
    """
    Undecoded bytes: a DER certificate (x5c) or an x5u response body.
    Callers that need a public key parse these themselves.
    """
    data: bytes
    source: KeyStrategy

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


KeyMaterial = Union[RSAPublicKey, RawKeyBytes]
