# tests/unit/test_csv_format.py

import logging

import numpy as np
import pytest

from physical_texture import (
    LENIENT_FORMAT,
    MAX_U32,
    CsvFormat,
    MalformedTextureError,
    Texture,
    TextureReleasedError,
    format_record,
    parse_record,
)
from tests.test_utils import REFERENCE_INTS, make_float_texture, make_int_texture


def test_format_record_layout() -> None:
    assert format_record(make_float_texture()) == (
        "2,2,0,4294967295,2147483647,1073741823,"
    )


def test_format_record_empty_texture() -> None:
    assert format_record(Texture.from_ints(0, 3, [])) == "0,3,"


def test_format_record_custom_delimiter() -> None:
    fmt = CsvFormat(delimiter=";")
    assert format_record(Texture.from_ints(2, 1, [5, 6]), fmt) == "2;1;5;6;"


def test_format_record_released_texture_raises() -> None:
    texture = make_int_texture()
    texture.release()
    with pytest.raises(TextureReleasedError):
        format_record(texture)


@pytest.mark.parametrize(
    "text",
    [
        "2,2,0,4294967295,2147483647,1073741823,",
        "2,2,0,4294967295,2147483647,1073741823",  # final delimiter omitted
        "2, 2,\n0,\n4294967295,\n2147483647,\n1073741823,\n",  # scanf-style whitespace
        " 2 ,2 , 0 ,4294967295,2147483647,1073741823 , ",
    ],
)
def test_parse_record_accepts(text: str) -> None:
    texture = parse_record(text)
    assert (texture.width, texture.height) == (2, 2)
    assert texture.samples().tolist() == REFERENCE_INTS


def test_parse_record_returns_u32_buffer() -> None:
    texture = parse_record("1,1,4294967295,")
    assert texture.samples().dtype == np.uint32
    assert int(texture.samples()[0]) == MAX_U32


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "missing width/height header"),
        ("3,", "missing width/height header"),
        ("x,1,", "width is not an unsigned decimal integer"),
        ("1,+1,5,", "height is not an unsigned decimal integer"),
        ("65536,0,", "width 65536 exceeds 65535"),
        ("1,1,-5,", "sample 0 is not an unsigned decimal integer"),
        ("2,1,1,abc,", "sample 1 is not an unsigned decimal integer"),
        ("1,1,4294967296,", "sample 0 4294967296 exceeds 4294967295"),
        ("1,1,1.5,", "sample 0 is not an unsigned decimal integer"),
        ("2,2,1,,3,4,", "empty field at position 3"),
        ("2,2,1,2,3,", "declares 4 samples, found 3"),
        ("1,1,1,2,", "declares 1 samples, found 2"),
    ],
)
def test_parse_record_rejects_malformed(text: str, message: str) -> None:
    with pytest.raises(MalformedTextureError) as excinfo:
        parse_record(text)
    assert message in str(excinfo.value)


def test_malformed_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_record("not a texture")


def test_lenient_parse_zero_fills_missing_samples(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING, logger="physical_texture")
    texture = parse_record("2,2,7,8,", LENIENT_FORMAT)
    assert texture.samples().tolist() == [7, 8, 0, 0]
    assert "missing samples left at 0" in caplog.text


def test_lenient_parse_ignores_surplus_fields(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING, logger="physical_texture")
    texture = parse_record("1,2,7,8,9,junk,", LENIENT_FORMAT)
    assert texture.samples().tolist() == [7, 8]
    assert "surplus fields ignored" in caplog.text


def test_lenient_parse_still_rejects_bad_tokens() -> None:
    with pytest.raises(MalformedTextureError):
        parse_record("2,1,7,x,", LENIENT_FORMAT)


def test_parse_record_error_names_origin() -> None:
    with pytest.raises(MalformedTextureError, match="height.csv"):
        parse_record("1,", origin="height.csv")


@pytest.mark.parametrize("delimiter", ["", ";;", "1", " ", "\n"])
def test_csv_format_rejects_bad_delimiters(delimiter: str) -> None:
    with pytest.raises(ValueError):
        CsvFormat(delimiter=delimiter)


def test_csv_format_is_frozen() -> None:
    fmt = CsvFormat()
    with pytest.raises(AttributeError):
        fmt.strict = False  # type: ignore[misc]
