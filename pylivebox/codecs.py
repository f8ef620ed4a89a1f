# pyLivebox - JSON field codecs
# -*- coding: utf-8 -*-
"""
 Field level decoding helpers for vendor-inconsistent router JSON

 Livebox compatible routers are built by several manufacturers and the same
 resource does not always come back with the same shape: integers show up as
 JSON numbers on one firmware and as numeric strings on another, some keys
 change capitalization (Idx / idx, Manufacturer / ManuFacturer) and enum-like
 strings gain vendor specific values. The models in pylivebox.models are
 pydantic models built on LiveboxModel and use the annotated field types
 below; key spellings are handled with pydantic AliasChoices.

 Functions:
    decode_flexible_int(raw, strict)         - int from a number or a numeric string
    encode_flexible_int(value)               - always the native int
    decode_first_of(data, keys, decode)      - first key that decodes wins
    decode_first_of_optional(data, keys, decode) - same, None when exhausted
    decode_enum(enum_cls, raw, default)      - case-insensitive closed enum
    decode_open_enum(enum_cls, raw)          - closed enum member or Unknown(raw)
    encode_enum(value)                       - wire string of an enum or Unknown
    list_of(model)                           - decoder for a JSON array of models

 Field types:
    FlexibleInt                              - Optional[int] through decode_flexible_int
    enum_field(enum_cls, default)            - closed enum through decode_enum
    open_enum_field(enum_cls)                - enum member or Unknown, both directions
"""

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Callable, List, Mapping, Optional, Sequence, Type, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, PlainValidator, TypeAdapter

from pylivebox.exceptions import InvalidValueError, KeyNotFoundError, CodecError

INT_REGEX = re.compile(r'^[+-]?\d+$')


class LiveboxModel(BaseModel):
    """
    Base of every router resource.

    Fields carry the router's JSON key as alias and can also be set by
    attribute name. Unknown keys are ignored, None values are left out
    when encoding.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_dict(cls, data):
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def identity(value: Any) -> Any:
    return value


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(value, "string")
    return value


@functools.lru_cache(maxsize=None)
def list_of(model: Type[BaseModel]) -> Callable[[Any], list]:
    """Build a decoder for a JSON array whose items are all `model`."""
    return TypeAdapter(List[model]).validate_python


# Flexible integers

def decode_flexible_int(raw: Any, strict: bool = False) -> Optional[int]:
    """
    Decode an integer that may arrive as a JSON number or as a numeric string.

    Args:
        raw: the JSON value ("123", 123, 123.0 or None)
        strict: raise InvalidValueError instead of returning None when the
            value is neither an integer nor a numeric string

    Returns:
        The native int, or None for null / undecodable values (non strict).
    """
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and INT_REGEX.match(raw):
        return int(raw)
    if strict:
        raise InvalidValueError(raw, "integer or numeric string")
    return None


def encode_flexible_int(value: Optional[int]) -> Optional[int]:
    # Never re-stringified, even when the router sent a string
    if value is None:
        return None
    return int(value)


FlexibleInt = Annotated[
    Optional[int],
    BeforeValidator(lambda raw: decode_flexible_int(raw)),
    PlainSerializer(encode_flexible_int),
]


# Key alternatives

def decode_first_of(data: Mapping, keys: Sequence[str], decode: Callable[[Any], Any] = identity) -> Any:
    """
    Decode the value of the first key that decodes successfully.

    Keys are tried in order so the canonical spelling can be listed first and
    known vendor variants after it. Raises KeyNotFoundError (for the first
    key) when none of the keys is present, or the last decode error when keys
    were present but none of them decoded.
    """
    last_error = None
    for key in keys:
        if key not in data:
            continue
        try:
            return decode(data[key])
        except CodecError as exc:
            last_error = exc
    if last_error is not None:
        raise last_error
    raise KeyNotFoundError(keys[0])


def decode_first_of_optional(data: Mapping, keys: Sequence[str],
                             decode: Callable[[Any], Any] = identity) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        try:
            return decode(value)
        except CodecError:
            continue
    return None


# Enums

@dataclass(frozen=True)
class Unknown:
    """A vendor value outside the known set, kept verbatim."""
    raw: str

    @property
    def value(self) -> str:
        return self.raw

    def __str__(self):
        return self.raw


def _lookup(enum_cls: Type[Enum], raw: str) -> Optional[Enum]:
    lowered = raw.lower()
    for member in enum_cls:
        if member.value.lower() == lowered:
            return member
    return None


def decode_enum(enum_cls: Type[Enum], raw: Any, default: Optional[Enum] = None) -> Enum:
    """Case-insensitive lookup; unknown or null values give `default` or raise."""
    if isinstance(raw, enum_cls):
        return raw
    if raw is None and default is not None:
        return default
    member = _lookup(enum_cls, as_str(raw))
    if member is not None:
        return member
    if default is not None:
        return default
    raise InvalidValueError(raw, f"one of {[m.value for m in enum_cls]}")


def decode_open_enum(enum_cls: Type[Enum], raw: Any) -> Union[Enum, Unknown]:
    if isinstance(raw, (enum_cls, Unknown)):
        return raw
    member = _lookup(enum_cls, as_str(raw))
    return member if member is not None else Unknown(raw)


def encode_enum(value: Union[Enum, Unknown]) -> str:
    return value.value


def enum_field(enum_cls: Type[Enum], default: Optional[Enum] = None):
    """Annotated type for a closed enum decoded with decode_enum."""
    return Annotated[enum_cls, BeforeValidator(lambda raw: decode_enum(enum_cls, raw, default))]


def open_enum_field(enum_cls: Type[Enum]):
    """Annotated type for an enum that keeps unlisted vendor values as Unknown."""
    return Annotated[
        Union[enum_cls, Unknown],
        PlainValidator(lambda raw: decode_open_enum(enum_cls, raw)),
        PlainSerializer(encode_enum, return_type=str),
    ]


def remove_colons(value: str) -> str:
    """MAC addresses are used without separators in URIs and ids."""
    return value.replace(":", "")
