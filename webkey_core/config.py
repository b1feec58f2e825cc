# webkey_core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os

DEFAULT_FETCH_TIMEOUT = 5.0
DEFAULT_MAX_BODY_BYTES = 1024 * 1024


@dataclass(frozen=True)
class WebKeyConfig:
    """
    Runtime settings for key-set retrieval.

    transport       "http" (requests) or "local" (in-memory documents)
    fetch_timeout   seconds allowed for one fetch, connect through last byte
    max_body_bytes  fetched bodies larger than this are rejected
    log_level       level applied to webkey_core loggers
    """
    transport: str = "http"
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    log_level: str = "INFO"


def load_config(config: dict | None = None) -> WebKeyConfig:
    """
    Resolve settings: explicit ``config`` keys win over environment variables,
    which win over the defaults.
    """
    config = config or {}

    transport = config.get("transport") or os.getenv("WEBKEY_TRANSPORT", "http")
    # explicit zeros must reach the positivity checks below
    timeout = (config["fetch_timeout"] if "fetch_timeout" in config
               else os.getenv("WEBKEY_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT))
    max_body = (config["max_body_bytes"] if "max_body_bytes" in config
                else os.getenv("WEBKEY_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES))
    log_level = config.get("log_level") or os.getenv("WEBKEY_LOG_LEVEL", "INFO")

    try:
        timeout = float(timeout)
        max_body = int(max_body)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid webkey fetch setting: {e}") from e

    if timeout <= 0:
        raise ValueError(f"fetch_timeout must be positive, got {timeout}")
    if max_body <= 0:
        raise ValueError(f"max_body_bytes must be positive, got {max_body}")

    return WebKeyConfig(
        transport=str(transport).lower(),
        fetch_timeout=timeout,
        max_body_bytes=max_body,
        log_level=str(log_level).upper(),
    )
