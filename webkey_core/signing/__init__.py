# webkey_core/signing/__init__.py

from .base import SigningMethod
from .registry import (
    SigningMethodFactory,
    SigningMethodRegistry,
    default_registry,
    get_signing_method,
    register_signing_method,
    require_signing_method,
)
from .hmac_methods import HMAC_ALGORITHMS, HMACSigningMethod

__all__ = [
    "SigningMethod",
    "SigningMethodFactory",
    "SigningMethodRegistry",
    "HMACSigningMethod",
    "HMAC_ALGORITHMS",
    "default_registry",
    "get_signing_method",
    "register_signing_method",
    "require_signing_method",
]
