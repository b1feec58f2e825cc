from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import json
import threading
import time

from webkey_core.errors import FetchCancelledError


@dataclass(frozen=True)
class FetchResponse:
    url: str
    status_code: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        # only 200 counts; redirects are followed by the transport
        return self.status_code == 200

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class BaseFetcher:
    """
    Blocking GET collaborator used for key-set and x5u retrieval.

    Implementations return the whole body in a FetchResponse and release the
    underlying connection before returning, on success and on failure.
    ``cancel`` is a threading.Event; once set, an in-flight fetch stops and
    raises FetchCancelledError.
    """
    name: str = "base"

    def get(
        self,
        url: str,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> FetchResponse:
        raise NotImplementedError

    def close(self) -> None:
        return

    @staticmethod
    def check_cancelled(
        url: str,
        cancel: Optional[threading.Event] = None,
        deadline: Optional[float] = None,
    ) -> None:
        if cancel is not None and cancel.is_set():
            raise FetchCancelledError(url, "was cancelled")
        if deadline is not None and time.monotonic() > deadline:
            raise FetchCancelledError(url, "exceeded its deadline")

    @staticmethod
    def to_bytes(payload: bytes | str | dict) -> bytes:
        if isinstance(payload, bytes):
            return payload
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
