# webkey_core/errors.py
from __future__ import annotations
from typing import Optional


class WebKeyError(Exception):
    pass


class MissingKidError(WebKeyError):
    def __init__(self, message: str = "No kid found"):
        super().__init__(message)


class MissingKeyError(WebKeyError):
    def __init__(self, kid: str = ""):
        self.kid = kid
        super().__init__(f"No key found for kid {kid!r}" if kid else "No key found")


class NoKeyStrategyError(WebKeyError):
    def __init__(self, kid: str = ""):
        self.kid = kid
        super().__init__("Could not determine a strategy for retrieving a key")


class DecodeError(WebKeyError):
    pass


class SignatureInvalidError(WebKeyError):
    def __init__(self, message: str = "Signature is invalid"):
        super().__init__(message)


class UnsupportedAlgorithmError(WebKeyError):
    def __init__(self, alg: str):
        self.alg = alg
        super().__init__(f"Unsupported signing algorithm {alg!r}")


class FetchError(WebKeyError):
    """
    A remote document (key set or x5u certificate) did not come back with 200.

    ``server_message`` carries the response body, or "" when there was none.
    ``subject`` names what was being fetched in the message.
    """

    def __init__(
        self,
        url: str,
        server_message: str = "",
        status_code: Optional[int] = None,
        subject: str = "a key set",
    ):
        self.url = url
        self.subject = subject
        self.server_message = server_message
        self.status_code = status_code
        super().__init__(self._compose())

    def _compose(self) -> str:
        msg = f"Failed to fetch {self.subject} from {self.url}."
        if self.server_message:
            msg += f' The server returned a message of "{self.server_message}".'
        return msg


class TransportError(WebKeyError):
    pass


class FetchCancelledError(TransportError):
    def __init__(self, url: str, reason: str = "cancelled"):
        self.url = url
        self.reason = reason
        super().__init__(f"Fetch of {url} {reason}")
