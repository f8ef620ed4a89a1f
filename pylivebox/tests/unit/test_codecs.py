import json
from enum import Enum

import pytest
from pydantic import Field, ValidationError

from pylivebox.codecs import (
    FlexibleInt, LiveboxModel, Unknown, as_str, decode_enum, decode_first_of, decode_first_of_optional,
    decode_flexible_int, decode_open_enum, encode_enum, encode_flexible_int, enum_field, list_of, open_enum_field,
    remove_colons
)
from pylivebox.exceptions import CodecError, InvalidValueError, KeyNotFoundError


class Color(Enum):
    RED = "Red"
    GREEN = "Green"


class Paint(LiveboxModel):
    color: enum_field(Color) = Field(alias="Color")
    accent: open_enum_field(Color) = Field(alias="Accent")
    fallback: enum_field(Color, Color.GREEN) = Field(Color.GREEN, alias="Fallback")
    coats: FlexibleInt = Field(None, alias="Coats")


@pytest.mark.parametrize("raw", ["123", 123, 123.0])
def test_flexible_int_accepts_numbers_and_numeric_strings(raw):
    assert decode_flexible_int(raw) == 123
    assert isinstance(decode_flexible_int(raw), int)


def test_flexible_int_negative_string():
    assert decode_flexible_int("-5") == -5


@pytest.mark.parametrize("raw", [None, "abc", "12.5", 12.5, True, [], {}])
def test_flexible_int_lenient_gives_none(raw):
    assert decode_flexible_int(raw) is None


def test_flexible_int_strict_raises():
    with pytest.raises(InvalidValueError):
        decode_flexible_int("abc", strict=True)
    # null is always absent, even when strict
    assert decode_flexible_int(None, strict=True) is None


def test_flexible_int_encodes_native_number():
    encoded = encode_flexible_int(decode_flexible_int("123"))
    assert encoded == 123
    assert json.dumps({"v": encoded}) == '{"v": 123}'
    assert encode_flexible_int(None) is None


def test_first_of_prefers_first_key():
    assert decode_first_of({"idx": "a", "Idx": "b"}, ("idx", "Idx"), as_str) == "a"


def test_first_of_falls_back_to_later_key():
    assert decode_first_of({"Idx": "b"}, ("idx", "Idx"), as_str) == "b"


def test_first_of_skips_key_that_fails_to_decode():
    assert decode_first_of({"idx": 5, "Idx": "b"}, ("idx", "Idx"), as_str) == "b"


def test_first_of_missing_reports_first_key():
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_first_of({}, ("Manufacturer", "ManuFacturer"), as_str)
    assert excinfo.value.key == "Manufacturer"
    assert isinstance(excinfo.value, KeyError)


def test_first_of_all_present_but_invalid_raises_last_error():
    with pytest.raises(CodecError):
        decode_first_of({"a": 1, "b": 2}, ("a", "b"), as_str)


def test_first_of_optional():
    assert decode_first_of_optional({"b": "x"}, ("a", "b"), as_str) == "x"
    assert decode_first_of_optional({"a": None, "b": 3}, ("a", "b"), as_str) is None
    assert decode_first_of_optional({}, ("a", "b")) is None


def test_enum_case_insensitive():
    assert decode_enum(Color, "rEd") is Color.RED


def test_closed_enum_unknown_value_raises():
    with pytest.raises(InvalidValueError):
        decode_enum(Color, "Blue")


def test_closed_enum_with_default():
    assert decode_enum(Color, "Blue", Color.GREEN) is Color.GREEN


def test_open_enum_keeps_unknown_raw_value():
    value = decode_open_enum(Color, "Mauve-ish")
    assert value == Unknown("Mauve-ish")
    assert encode_enum(value) == "Mauve-ish"


def test_open_enum_known_value_encodes_canonical():
    assert encode_enum(decode_open_enum(Color, "green")) == "Green"


def test_remove_colons():
    assert remove_colons("AA:BB:CC:DD:EE:FF") == "AABBCCDDEEFF"


def test_closed_enum_null_uses_default():
    assert decode_enum(Color, None, Color.GREEN) is Color.GREEN
    with pytest.raises(InvalidValueError):
        decode_enum(Color, None)


def test_model_fields_decode_vendor_shapes():
    paint = Paint.from_dict({"Color": "red", "Accent": "Teal", "Fallback": "Purple", "Coats": "2"})
    assert paint.color is Color.RED
    assert paint.accent == Unknown("Teal")
    assert paint.fallback is Color.GREEN
    assert paint.coats == 2
    assert paint.to_dict() == {"Color": "Red", "Accent": "Teal", "Fallback": "Green", "Coats": 2}


def test_model_leaves_out_absent_values():
    paint = Paint.from_dict({"Color": "Green", "Accent": "green", "Coats": "many"})
    assert paint.coats is None
    assert paint.to_dict() == {"Color": "Green", "Accent": "Green", "Fallback": "Green"}


def test_model_construction_by_attribute_name():
    paint = Paint(color=Color.RED, accent=Unknown("Teal"))
    assert paint.to_dict()["Accent"] == "Teal"


def test_model_closed_enum_failure_is_validation_error():
    with pytest.raises(ValidationError) as excinfo:
        Paint.from_dict({"Color": "Blue", "Accent": "Red"})
    assert excinfo.value.errors()[0]["loc"] == ("Color",)
    assert isinstance(excinfo.value, ValueError)


def test_list_of_models():
    decode = list_of(Paint)
    assert decode is list_of(Paint)
    paints = decode([{"Color": "Red", "Accent": "Red"}, {"Color": "Green", "Accent": "Blue"}])
    assert [p.color for p in paints] == [Color.RED, Color.GREEN]
    with pytest.raises(ValidationError):
        decode({"Color": "Red"})
