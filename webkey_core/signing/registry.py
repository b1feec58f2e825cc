"""
webkey_core.signing.registry
----------------------------
Process-wide mapping of algorithm name -> zero-argument SigningMethod factory.

Algorithm modules register themselves when imported. Registration overwrites
(last writer wins) and there is no removal. Absence on lookup is reported as
None; require_signing_method() turns it into UnsupportedAlgorithmError.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
import threading

from webkey_core.errors import UnsupportedAlgorithmError
from webkey_core.logger import get_logger
from webkey_core.signing.base import SigningMethod

log = get_logger("WebKey.Signing")

SigningMethodFactory = Callable[[], SigningMethod]


class SigningMethodRegistry:
    def __init__(self):
        self._factories: Dict[str, SigningMethodFactory] = {}
        self._lock = threading.Lock()

    def register(self, name: str, factory: SigningMethodFactory) -> None:
        with self._lock:
            replaced = name in self._factories
            self._factories[name] = factory
        if replaced:
            log.info(f"[REGISTRY] replaced signing method {name}")
        else:
            log.debug(f"[REGISTRY] registered signing method {name}")

    def get(self, name: str) -> Optional[SigningMethodFactory]:
        with self._lock:
            return self._factories.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None


_registry = SigningMethodRegistry()


def default_registry() -> SigningMethodRegistry:
    return _registry


def register_signing_method(name: str, factory: SigningMethodFactory) -> None:
    _registry.register(name, factory)


def get_signing_method(name: str) -> Optional[SigningMethodFactory]:
    return _registry.get(name)


def require_signing_method(name: str) -> SigningMethod:
    factory = _registry.get(name)
    if factory is None:
        raise UnsupportedAlgorithmError(name)
    return factory()
