# webkey_core/signing/base.py
from __future__ import annotations
from typing import Any


class SigningMethod:
    """
    One signature algorithm.

    sign()   returns the base64url signature segment for ``signing_input``
    verify() returns None on success and raises on any mismatch

    Implementations are stateless and safe to share between threads.
    """
    alg: str = ""

    def sign(self, signing_input: str, key: Any) -> str:
        raise NotImplementedError

    def verify(self, signing_input: str, signature: str, key: Any) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alg={self.alg!r})"
