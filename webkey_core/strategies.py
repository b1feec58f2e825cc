"""
webkey_core.strategies
----------------------
Procedures turning a WebKey into key material, selected by WebKey.strategy:

- MODULUS_AND_EXPONENT: n/e decoded as big-endian unsigned integers
- CERTIFICATE_PEM:      x5c bytes returned unparsed
- CERTIFICATE_URL:      x5u fetched, response body returned unparsed
- UNKNOWN:              NoKeyStrategyError
"""

from __future__ import annotations
from typing import Callable, Dict, Optional
import threading

from .errors import FetchError, NoKeyStrategyError
from .logger import get_logger
from .material import KeyMaterial, RawKeyBytes, RSAPublicKey
from .transport import BaseFetcher, fetcher_factory
from .utils import b64d_std, decode_segment
from .webkey import KeyStrategy, WebKey

log = get_logger("WebKey.Strategy")

StrategyFn = Callable[[WebKey, Optional[BaseFetcher], Optional[float], Optional[threading.Event]], KeyMaterial]


def _modulus_and_exponent(wk: WebKey, fetcher, timeout, cancel) -> RSAPublicKey:
    modulus = int.from_bytes(decode_segment(wk.n), "big")
    exponent = int.from_bytes(decode_segment(wk.e), "big")
    return RSAPublicKey(modulus=modulus, exponent=exponent)


def _certificate_pem(wk: WebKey, fetcher, timeout, cancel) -> RawKeyBytes:
    data = b64d_std(wk.x5c) if wk.x5c_std else decode_segment(wk.x5c)
    return RawKeyBytes(data=data, source=KeyStrategy.CERTIFICATE_PEM)


def _certificate_url(wk: WebKey, fetcher, timeout, cancel) -> RawKeyBytes:
    fetcher = fetcher or fetcher_factory()
    res = fetcher.get(wk.x5u, timeout=timeout, cancel=cancel)
    if not res.ok:
        log.error(f"[X5U GET] {res.status_code} {wk.x5u} | kid={wk.kid}")
        raise FetchError(wk.x5u, res.text, res.status_code, subject="a certificate")
    return RawKeyBytes(data=res.body, source=KeyStrategy.CERTIFICATE_URL)


STRATEGIES: Dict[KeyStrategy, StrategyFn] = {
    KeyStrategy.MODULUS_AND_EXPONENT: _modulus_and_exponent,
    KeyStrategy.CERTIFICATE_PEM: _certificate_pem,
    KeyStrategy.CERTIFICATE_URL: _certificate_url,
}


def extract_key(
    wk: WebKey,
    fetcher: Optional[BaseFetcher] = None,
    timeout: Optional[float] = None,
    cancel: Optional[threading.Event] = None,
) -> KeyMaterial:
    strategy = wk.strategy
    if strategy is KeyStrategy.UNKNOWN:
        raise NoKeyStrategyError(wk.kid)
    log.debug(f"[EXTRACT] kid={wk.kid} strategy={strategy.value}")
    return STRATEGIES[strategy](wk, fetcher, timeout, cancel)
