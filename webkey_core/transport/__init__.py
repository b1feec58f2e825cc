# webkey_core/transport/__init__.py
from __future__ import annotations

from webkey_core.config import WebKeyConfig, load_config
from webkey_core.logger import apply_log_level
from webkey_core.transport.transport_base import BaseFetcher, FetchResponse
from webkey_core.transport.transport_http import HTTPFetcher
from webkey_core.transport.transport_local import LocalFetcher


def fetcher_factory(config: WebKeyConfig | dict | None = None) -> BaseFetcher:
    """
    transport:
      - "http"  → requests-backed HTTPFetcher (default)
      - "local" → empty LocalFetcher, documents added with serve()

    An explicit ``config`` also applies its log_level to the WebKey loggers.
    """
    explicit = config is not None
    if not isinstance(config, WebKeyConfig):
        config = load_config(config)
    if explicit:
        apply_log_level(config.log_level)

    if config.transport == "http":
        return HTTPFetcher(timeout=config.fetch_timeout, max_body_bytes=config.max_body_bytes)

    if config.transport == "local":
        return LocalFetcher()

    raise ValueError(f"Unknown webkey transport: {config.transport}")


__all__ = [
    "BaseFetcher",
    "FetchResponse",
    "HTTPFetcher",
    "LocalFetcher",
    "fetcher_factory",
]
