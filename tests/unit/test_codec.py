import io
import json

import pytest

from shamir_core.codec import (
    ShareRecord,
    decode_share,
    decode_shares,
    encode_share,
    format_secret,
    parse_secret,
    write_shares,
)
from shamir_core.errors import MalformedInput
from shamir_core.field import FieldElement
from shamir_core.sharing import Share


def _share(x: int, y: int) -> Share:
    return Share(x=FieldElement(x), y=FieldElement(y))


def test_encode_share_is_hex_record():
    line = encode_share(_share(0xAB, 0xCDEF))
    assert json.loads(line) == {"x": "ab", "y": "cdef"}


def test_decode_share_accepts_prefixed_hex():
    assert decode_share('{"x": "0xAB", "y": "cdef"}') == _share(0xAB, 0xCDEF)


@pytest.mark.parametrize(
    "line",
    [
        "not json",
        '{"x": "ab"}',
        '{"x": "ab", "y": "zz"}',
        '{"x": "ab", "y": ""}',
        '{"x": 171, "y": "cdef"}',
        '{"x": "ab", "y": "cd", "z": "ef"}',
    ],
)
def test_decode_share_rejects_malformed(line: str) -> None:
    with pytest.raises(MalformedInput):
        decode_share(line)


def test_decode_shares_skips_blank_lines():
    lines = [encode_share(_share(1, 2)), "", "   ", encode_share(_share(3, 4))]
    assert decode_shares(lines) == [_share(1, 2), _share(3, 4)]


def test_decode_shares_aborts_whole_batch():
    lines = [encode_share(_share(1, 2)), '{"x": "1"', encode_share(_share(3, 4))]
    with pytest.raises(MalformedInput, match="line 2"):
        decode_shares(lines)


def test_write_shares_emits_one_record_per_line():
    stream = io.StringIO()
    count = write_shares([_share(1, 2), _share(3, 4)], stream)
    assert count == 2
    lines = stream.getvalue().splitlines()
    assert decode_shares(lines) == [_share(1, 2), _share(3, 4)]


def test_share_record_normalises_hex():
    record = ShareRecord(x="0x00FF", y="A")
    assert record.x == "ff"
    assert record.to_share() == _share(255, 10)


def test_secret_text_helpers():
    secret = parse_secret("0xABCDEFDEADBEEF")
    assert secret == FieldElement(0xABCDEFDEADBEEF)
    assert format_secret(secret) == "abcdefdeadbeef"
    with pytest.raises(MalformedInput):
        parse_secret("hello")


def test_decode_shares_accepts_utf8_bytes():
    lines = [(encode_share(_share(1, 2)) + "\n").encode("utf-8"), b"\n"]
    assert decode_shares(lines) == [_share(1, 2)]


def test_decode_shares_rejects_invalid_utf8():
    lines = [(encode_share(_share(1, 2)) + "\n").encode("utf-8"), b'{"x": "\xff\xfe", "y": "01"}\n']
    with pytest.raises(MalformedInput, match="line 2"):
        decode_shares(lines)
