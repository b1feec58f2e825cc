# webkey_core/transport/transport_local.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import threading

from webkey_core.logger import get_logger
from webkey_core.transport.transport_base import BaseFetcher, FetchResponse

log = get_logger("WebKey.Transport.Local")


class LocalFetcher(BaseFetcher):
    """
    In-process fetcher serving documents registered with serve().

    Unknown URLs answer 404 with an empty body. Used for offline setups
    and tests.
    """
    name = "local"

    def __init__(self, documents: Optional[Dict[str, bytes | str | dict]] = None):
        self._documents: Dict[str, Tuple[int, bytes]] = {}
        self._lock = threading.Lock()
        self.requested: List[str] = []
        for url, body in (documents or {}).items():
            self.serve(url, body)

    def serve(self, url: str, body: bytes | str | dict, status_code: int = 200) -> None:
        with self._lock:
            self._documents[url] = (status_code, self.to_bytes(body))

    def get(
        self,
        url: str,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> FetchResponse:
        self.check_cancelled(url, cancel)
        with self._lock:
            self.requested.append(url)
            status, body = self._documents.get(url, (404, b""))
        log.debug(f"[LOCAL GET] {status} {url}")
        return FetchResponse(url=url, status_code=status, body=body)
