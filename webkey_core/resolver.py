# webkey_core/resolver.py
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, TYPE_CHECKING
import threading

from .errors import MissingKeyError, MissingKidError
from .logger import get_logger
from .material import KeyMaterial

if TYPE_CHECKING:
    from .keyset import WebKeySet
    from .transport import BaseFetcher

log = get_logger("WebKey.Resolver")

HEADER_KID = "kid"


class Token(Protocol):
    def kid(self) -> str:
        """The token's key identifier, or "" when it carries none."""
        ...


@dataclass(frozen=True)
class HeaderToken:
    """Token view over an already-decoded JOSE header."""
    header: Mapping[str, Any] = field(default_factory=dict)

    def kid(self) -> str:
        value = self.header.get(HEADER_KID, "")
        return value if isinstance(value, str) else ""


def resolve(
    key_set: "WebKeySet",
    token: Token,
    fetcher: Optional["BaseFetcher"] = None,
    timeout: Optional[float] = None,
    cancel: Optional[threading.Event] = None,
) -> KeyMaterial:
    """
    Find the record named by ``token``'s kid (first match) and return its key
    material. Strategy errors propagate unchanged.
    """
    kid = token.kid()
    if not kid:
        raise MissingKidError()

    wk = key_set.find(kid)
    if wk is None:
        log.warning(f"[RESOLVE] no key for kid={kid} | known={key_set.kids()}")
        raise MissingKeyError(kid)

    log.debug(f"[RESOLVE] kid={kid} strategy={wk.strategy.value}")
    return wk.key(fetcher=fetcher, timeout=timeout, cancel=cancel)
