"""
webkey_core.keyset
------------------
WebKeySet: the ordered records of a ``{"keys": [...]}`` document.

Sets are built per call and never cached; fetch again to pick up rotation.
Lookup is first match by kid, in document order.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import IO, Iterable, List, Optional
import io
import json
import threading

from .errors import DecodeError, FetchError
from .logger import get_logger
from .material import KeyMaterial
from .transport import BaseFetcher, fetcher_factory
from .webkey import WebKey

log = get_logger("WebKey.KeySet")


class WebKeySet(Sequence):
    def __init__(self, keys: Iterable[WebKey] = ()):
        self._keys = tuple(keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __getitem__(self, index):
        return self._keys[index]

    def __repr__(self) -> str:
        return f"WebKeySet(kids={self.kids()!r})"

    def find(self, kid: str) -> Optional[WebKey]:
        return next((wk for wk in self._keys if wk.kid == kid), None)

    def kids(self) -> List[str]:
        return [wk.kid for wk in self._keys]

    def key_func(
        self,
        token,
        fetcher: Optional[BaseFetcher] = None,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> KeyMaterial:
        """Resolve ``token`` against this set; usable as a verifier key callback."""
        from .resolver import resolve
        return resolve(self, token, fetcher=fetcher, timeout=timeout, cancel=cancel)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_stream(cls, stream: IO[bytes]) -> "WebKeySet":
        try:
            doc = json.load(stream)
        except ValueError as e:
            raise DecodeError(f"key set is not valid JSON: {e}") from e

        if not isinstance(doc, dict):
            raise DecodeError(f"key set must be a JSON object, got {type(doc).__name__}")

        entries = doc.get("keys")
        if entries is None:
            return cls()
        if not isinstance(entries, list):
            raise DecodeError("key set member 'keys' must be an array")

        return cls(WebKey.from_dict(entry) for entry in entries)

    @classmethod
    def from_bytes(cls, data: bytes | str) -> "WebKeySet":
        if isinstance(data, str):
            data = data.encode("utf-8")
        return cls.from_stream(io.BytesIO(data))

    @classmethod
    def from_url(
        cls,
        url: str,
        fetcher: Optional[BaseFetcher] = None,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> "WebKeySet":
        """
        Fetch and decode the key set published at ``url``.

        Anything but a 200 raises FetchError carrying the response body as
        the server message. The transport has released the connection by
        the time get() returns or raises.
        """
        fetcher = fetcher or fetcher_factory()
        log.info(f"[JWKS GET] → {url} | transport={fetcher.name}")

        res = fetcher.get(url, timeout=timeout, cancel=cancel)
        if not res.ok:
            log.error(f"[JWKS GET] {res.status_code}: {url}")
            raise FetchError(url, res.text, res.status_code)

        key_set = cls.from_stream(io.BytesIO(res.body))
        log.info(f"[JWKS GET] {url} | keys={len(key_set)}")
        return key_set
