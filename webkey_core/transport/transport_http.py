# webkey_core/transport/transport_http.py
from __future__ import annotations
from typing import Optional
import threading
import time

import requests

from webkey_core.config import DEFAULT_FETCH_TIMEOUT, DEFAULT_MAX_BODY_BYTES
from webkey_core.errors import FetchCancelledError, TransportError
from webkey_core.logger import get_logger
from webkey_core.transport.transport_base import BaseFetcher, FetchResponse

log = get_logger("WebKey.Transport.HTTP")

CHUNK_SIZE = 8192


class HTTPFetcher(BaseFetcher):
    """
    requests-backed fetcher.

    The body is streamed so that cancellation, the deadline and the size cap
    are checked between chunks. The response is always closed before get()
    returns or raises.
    """
    name = "http"

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.max_body_bytes = max_body_bytes
        self._session = session

    def get(
        self,
        url: str,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> FetchResponse:
        timeout = self.timeout if timeout is None else timeout
        if timeout <= 0:
            raise FetchCancelledError(url, f"has no time left (timeout={timeout})")
        deadline = time.monotonic() + timeout
        self.check_cancelled(url, cancel, deadline)

        client = self._session or requests
        log.debug(f"[HTTP GET] → {url} | timeout={timeout}")
        try:
            res = client.get(url, stream=True, timeout=timeout)
        except requests.Timeout as e:
            log.warning(f"[HTTP GET] timeout connecting to {url}")
            raise FetchCancelledError(url, "timed out") from e
        except requests.RequestException as e:
            log.error(f"[HTTP GET] {url} failed: {e}")
            raise TransportError(f"GET {url} failed: {e}") from e

        try:
            body = self._read_body(url, res, cancel, deadline)
        finally:
            res.close()

        log.info(f"[HTTP GET] {res.status_code} {url} | bytes={len(body)}")
        return FetchResponse(url=url, status_code=res.status_code, body=body)

    def _read_body(self, url, res, cancel, deadline) -> bytes:
        chunks = []
        size = 0
        try:
            for chunk in res.iter_content(chunk_size=CHUNK_SIZE):
                self.check_cancelled(url, cancel, deadline)
                size += len(chunk)
                if size > self.max_body_bytes:
                    raise TransportError(
                        f"GET {url} returned more than {self.max_body_bytes} bytes"
                    )
                chunks.append(chunk)
        except requests.Timeout as e:
            raise FetchCancelledError(url, "timed out") from e
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed while reading: {e}") from e
        return b"".join(chunks)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
