import pytest

from elgamal_he.crypto.encoding import (
    MessageKind,
    Plaintext,
    decode_message,
    encode_message,
    parse_int,
)


def test_parse_int():
    assert parse_int(42) == 42
    assert parse_int("42") == 42
    assert parse_int(" 0x2a ") == 42
    assert parse_int("0X2A") == 42
    with pytest.raises(ValueError):
        parse_int("forty-two")
    with pytest.raises(TypeError):
        parse_int(True)


def test_byte_string_is_big_endian():
    assert Plaintext.from_bytes(b"\x01\x00").value == 256
    assert Plaintext.from_text("A").value == 0x41
    assert Plaintext(value=0x4142).to_text() == "AB"


def test_text_and_bytes_encode_identically():
    text = "héllo"
    assert encode_message(text, MessageKind.BYTE_STRING) == encode_message(
        text.encode("utf-8"), MessageKind.BYTE_STRING
    )
    assert decode_message(encode_message(text, MessageKind.BYTE_STRING), MessageKind.BYTE_STRING) == text.encode()


def test_empty_and_leading_zero_bytes():
    assert Plaintext.from_text("").value == 0
    assert Plaintext.from_text("").to_bytes() == b""
    assert Plaintext.from_bytes(b"\x00\x01").to_bytes() == b"\x01"


def test_numeric_kind_parses_decimal():
    assert encode_message("1234", MessageKind.NUMERIC).value == 1234
    assert encode_message(1234, MessageKind.NUMERIC).value == 1234
    assert decode_message(Plaintext(value=1234), MessageKind.NUMERIC) == 1234
    with pytest.raises(ValueError):
        encode_message("12ab", MessageKind.NUMERIC)


def test_raw_integer_kind_passes_through():
    big = 2**300 + 17
    assert encode_message(big, MessageKind.RAW_INTEGER).value == big
    assert decode_message(Plaintext(value=big), MessageKind.RAW_INTEGER) == big
    with pytest.raises(ValueError):
        encode_message(-1, MessageKind.RAW_INTEGER)


def test_fits():
    assert Plaintext(value=16).fits(17)
    assert not Plaintext(value=17).fits(17)
    assert int(Plaintext(value=5)) == 5
