import io
import threading

import pytest
import requests

from webkey_core.errors import DecodeError, FetchCancelledError, FetchError, TransportError
from webkey_core.keyset import WebKeySet
from webkey_core.transport import HTTPFetcher, LocalFetcher

JWKS_URL = "https://issuer.example/.well-known/jwks.json"


def verify_sample(wks):
    assert len(wks) == 2
    assert wks.kids() == ["abc123", "cert-1"]
    assert wks[0].e == "AQAB"
    assert wks[1].x5t_s256 == "c2hhMjU2LXRodW1icHJpbnQ"


def test_from_stream(sample_jwks_bytes, token):
    wks = WebKeySet.from_stream(io.BytesIO(sample_jwks_bytes))
    verify_sample(wks)
    assert wks.key_func(token("abc123")).exponent == 65537


def test_from_bytes_accepts_text():
    wks = WebKeySet.from_bytes('{"keys": [{"kid": "a"}]}')
    assert wks.kids() == ["a"]


def test_missing_keys_member_is_an_empty_set():
    assert len(WebKeySet.from_bytes(b"{}")) == 0


@pytest.mark.parametrize("doc", [
    b"{not json",
    b"[]",
    b'{"keys": {"kid": "a"}}',
    b'{"keys": ["a"]}',
    b'{"keys": [{"kid": 1}]}',
    b"\xff\xfe",
])
def test_malformed_documents(doc):
    with pytest.raises(DecodeError):
        WebKeySet.from_bytes(doc)


def test_find_returns_first_match():
    wks = WebKeySet.from_bytes(b'{"keys": [{"kid": "dup", "alg": "first"}, {"kid": "dup", "alg": "second"}]}')
    assert wks.find("dup").alg == "first"
    assert wks.find("other") is None


def test_from_url(fake_http, sample_jwks_bytes, caplog):
    fake_http.route(JWKS_URL, 200, sample_jwks_bytes)
    wks = WebKeySet.from_url(JWKS_URL)
    verify_sample(wks)
    assert fake_http.responses[0].closed
    assert fake_http.calls[0][1]["stream"] is True
    assert "[JWKS GET]" in caplog.text


def test_from_url_failure_carries_server_message(fake_http):
    fake_http.route(JWKS_URL, 500, "server down")
    with pytest.raises(FetchError) as exc:
        WebKeySet.from_url(JWKS_URL)
    message = str(exc.value)
    assert JWKS_URL in message
    assert "server down" in message
    assert exc.value.server_message == "server down"
    assert fake_http.responses[0].closed


def test_from_url_failure_without_body(fake_http):
    fake_http.route(JWKS_URL, 404, b"")
    with pytest.raises(FetchError) as exc:
        WebKeySet.from_url(JWKS_URL)
    assert str(exc.value) == f"Failed to fetch a key set from {JWKS_URL}."


def test_from_url_decode_failure_still_closes(fake_http):
    fake_http.route(JWKS_URL, 200, b"<html>")
    with pytest.raises(DecodeError):
        WebKeySet.from_url(JWKS_URL)
    assert fake_http.responses[0].closed


def test_from_url_with_local_fetcher(sample_jwks_bytes):
    fetcher = LocalFetcher({JWKS_URL: sample_jwks_bytes})
    verify_sample(WebKeySet.from_url(JWKS_URL, fetcher=fetcher))


def test_cancelled_before_fetch(fake_http):
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(FetchCancelledError):
        WebKeySet.from_url(JWKS_URL, cancel=cancel)
    assert fake_http.calls == []


def test_cancelled_while_reading(fake_http, sample_jwks_bytes):
    cancel = threading.Event()
    fake_http.route(JWKS_URL, 200, sample_jwks_bytes, on_chunk=lambda i: cancel.set())
    with pytest.raises(FetchCancelledError):
        WebKeySet.from_url(JWKS_URL, cancel=cancel)
    assert fake_http.responses[0].closed


def test_body_size_cap(fake_http):
    fake_http.route(JWKS_URL, 200, b'{"keys": []}' * 4)
    with pytest.raises(TransportError):
        WebKeySet.from_url(JWKS_URL, fetcher=HTTPFetcher(max_body_bytes=16))
    assert fake_http.responses[0].closed


def test_connection_errors(monkeypatch):
    def refuse(url, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "get", refuse)
    with pytest.raises(TransportError) as exc:
        WebKeySet.from_url(JWKS_URL)
    assert not isinstance(exc.value, FetchCancelledError)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_timeouts_surface_as_cancellation(monkeypatch):
    def slow(url, **kwargs):
        raise requests.ReadTimeout("slow")

    monkeypatch.setattr(requests, "get", slow)
    with pytest.raises(FetchCancelledError):
        WebKeySet.from_url(JWKS_URL, timeout=0.5)


@pytest.mark.parametrize("timeout", [0, -1.5])
def test_non_positive_timeout_is_a_cancellation(fake_http, timeout):
    with pytest.raises(FetchCancelledError):
        WebKeySet.from_url(JWKS_URL, timeout=timeout)
    assert fake_http.calls == []
