import pytest

from mlcore.text import (
    SAD_FACE,
    bytes_to_text,
    code_point_to_text,
    code_points_to_text,
    length_in_bytes,
    text_to_bytes,
    text_to_code_points,
    validate_code_point,
)

SAMPLES = ["", "hello", "größe", "日本語のテキスト", "emoji \U0001F600 here"]


@pytest.mark.parametrize("c", [0, ord("A"), 0x2639, 0x10FFFF])
def test_valid_code_points(c):
    assert validate_code_point(c) is True


@pytest.mark.parametrize("c", [-1, 0xD800, 0xDFFF, 0x110000])
def test_invalid_code_points(c):
    assert validate_code_point(c) is False


def test_code_point_to_text_valid():
    assert code_point_to_text(ord("x")) == "x"


def test_code_point_to_text_invalid_is_sad_face():
    assert code_point_to_text(0xD800) == chr(SAD_FACE)


@pytest.mark.parametrize("text", SAMPLES)
def test_bytes_round_trip(text):
    assert bytes_to_text(text_to_bytes(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_code_points_round_trip(text):
    assert code_points_to_text(text_to_code_points(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_length_in_bytes_matches_encoding(text):
    assert length_in_bytes(text) == len(text_to_bytes(text))


def test_length_in_bytes_multibyte_exceeds_code_points():
    text = "日本語"
    assert length_in_bytes(text) > len(text_to_code_points(text))


def test_bytes_to_text_empty():
    assert bytes_to_text([]) == ""


def test_bytes_to_text_accepts_int_list():
    assert bytes_to_text(list(b"abc")) == "abc"


def test_code_points_to_text_replaces_invalid():
    result = code_points_to_text([ord("a"), 0xDC00, ord("b")])
    assert result == "a" + chr(SAD_FACE) + "b"


def test_text_to_bytes_has_no_terminator():
    assert text_to_bytes("ab") == b"ab"