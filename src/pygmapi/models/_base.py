"""Base models for GM API payloads.

The upstream encodes every scalar as ``{"type": ..., "value": "..."}``
where ``value`` is a string regardless of the logical type (``"True"``,
``"30"``, ``"null"``).  :class:`TypedField` decodes such a field into a
native value in one place so translation code never compares raw
strings itself.

Canonical (outgoing) models inherit from :class:`GmResultModel` which
serializes snake_case fields to the camelCase keys callers expect.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Upstream booleans are the strings "True"/"False".
_TRUE = "True"


class FieldType(enum.StrEnum):
    """Declared ``type`` tag of an upstream typed field.

    Tags without a mapped member resolve to ``UNKNOWN`` and decode as
    plain strings instead of failing validation.
    """

    STRING = "String"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    NULL = "Null"
    ARRAY = "Array"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> FieldType:
        return cls.UNKNOWN


def parse_number(value: Any) -> int | float:
    """Convert an upstream numeric string to ``int`` when integral, else ``float``.

    Raises :class:`ValueError` for unparseable or non-finite values.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"not a finite number: {value!r}")
    if result.is_integer():
        return int(result)
    return result


class TypedField(BaseModel):
    """One ``{type, value}`` leaf (or ``{type, values}`` array) of an upstream document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: FieldType = FieldType.UNKNOWN
    value: Any = None
    values: list[dict[str, TypedField]] = Field(default_factory=list)

    def as_bool(self) -> bool:
        """Exact-string boolean: only ``"True"`` is true."""
        return self.value == _TRUE

    def decode(self) -> Any:
        """Return the native Python value for this field."""
        match self.type:
            case FieldType.NULL:
                return None
            case FieldType.BOOLEAN:
                return self.as_bool()
            case FieldType.NUMBER:
                return parse_number(self.value)
            case FieldType.ARRAY:
                return [{key: item.decode() for key, item in record.items()} for record in self.values]
            case _:
                return self.value


class GmResultModel(BaseModel):
    """Base for canonical results handed back to callers."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


def to_payload(result: BaseModel) -> Any:
    """Serialize a canonical result to its JSON-ready form."""
    return result.model_dump(mode="json", by_alias=True)
