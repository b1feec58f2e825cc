import base64

import pytest

from webkey_core.errors import DecodeError
from webkey_core.utils import b64d_std, decode_segment, encode_segment


def test_encode_strips_padding_and_uses_url_alphabet():
    assert encode_segment(b"\xff\xfe") == "__4"


def test_decode_accepts_unpadded_and_padded():
    assert decode_segment("__4") == b"\xff\xfe"
    assert decode_segment("__4=") == b"\xff\xfe"
    assert decode_segment("AQAB") == b"\x01\x00\x01"
    assert decode_segment("") == b""


@pytest.mark.parametrize("bad", ["ab+c", "ab/c", "a b", "abcde", "é"])
def test_decode_rejects_malformed(bad):
    with pytest.raises(DecodeError):
        decode_segment(bad)


def test_decode_rejects_non_string():
    with pytest.raises(DecodeError):
        decode_segment(b"AQAB")


def test_standard_base64_for_x5c_entries():
    raw = b"\x01\x02\xfb\xff"
    assert b64d_std(base64.b64encode(raw).decode("ascii")) == raw
    with pytest.raises(DecodeError):
        b64d_std("!!!!")
