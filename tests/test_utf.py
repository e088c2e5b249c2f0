import pytest

from jsonvalue.utf import (
    Utf8Error,
    utf8_check_first,
    utf8_check_full,
    utf8_check_string,
    utf8_encode,
    utf8_iterate,
)

SAMPLE_CODEPOINTS = [0x0, 0x41, 0x7F, 0x80, 0xE9, 0x7FF, 0x800, 0x20AC,
                     0xFFFF, 0x10000, 0x1F600, 0x10FFFF]


@pytest.mark.parametrize("codepoint", SAMPLE_CODEPOINTS)
def test_encode_matches_codec(codepoint):
    assert utf8_encode(codepoint) == chr(codepoint).encode("utf-8")


@pytest.mark.parametrize("codepoint", [-1, 0x110000])
def test_encode_out_of_range(codepoint):
    with pytest.raises(ValueError):
        utf8_encode(codepoint)


def test_encode_surrogate_is_rejected_by_check():
    encoded = utf8_encode(0xD800)
    assert len(encoded) == 3
    assert utf8_check_full(encoded) is None


@pytest.mark.parametrize("codepoint", SAMPLE_CODEPOINTS)
def test_check_first_gives_sequence_length(codepoint):
    encoded = chr(codepoint).encode("utf-8")
    assert utf8_check_first(encoded[0]) == len(encoded)


@pytest.mark.parametrize("byte", [0x80, 0xBF, 0xC0, 0xC1, 0xF5, 0xFF])
def test_check_first_rejects(byte):
    assert not utf8_check_first(byte)


@pytest.mark.parametrize("codepoint", [c for c in SAMPLE_CODEPOINTS if c >= 0x80])
def test_check_full_decodes(codepoint):
    assert utf8_check_full(chr(codepoint).encode("utf-8")) == codepoint


@pytest.mark.parametrize(
    "buffer",
    [
        b"\xc0\x80",          # overlong
        b"\xe0\x80\x80",      # overlong
        b"\xf0\x80\x80\x80",  # overlong
        b"\xed\xa0\x80",      # surrogate
        b"\xf4\x90\x80\x80",  # beyond U+10FFFF
        b"\xc3\x41",          # not a continuation byte
        b"a",                 # wrong size
        b"",
    ],
)
def test_check_full_rejects(buffer):
    assert utf8_check_full(buffer) is None


def test_iterate_yields_codepoints():
    text = "h\u00e9llo \u20ac \U0001F600"
    assert list(utf8_iterate(text.encode("utf-8"))) == [ord(c) for c in text]


def test_iterate_empty():
    assert list(utf8_iterate(b"")) == []


def test_iterate_reports_position():
    with pytest.raises(Utf8Error) as info:
        list(utf8_iterate(b"ab\xffcd"))
    assert info.value.position == 2


def test_iterate_truncated():
    with pytest.raises(Utf8Error):
        list(utf8_iterate("\u20ac".encode("utf-8")[:2]))


def test_check_string_valid():
    assert utf8_check_string("foo \u00e9 \U0001F600".encode("utf-8"))
    assert utf8_check_string(b"")


@pytest.mark.parametrize("data", [b"a\xefz", b"qu\xff", b"\xfd\xfe\xff", b"\xe2\x82"])
def test_check_string_invalid(data):
    assert not utf8_check_string(data)