"""The type tags of script values and their JSON names."""

from __future__ import annotations

import enum
from typing import Dict


class TypeError_(ValueError):
    """Raised when a JSON value does not name a known type."""


_VARIANTS = ("any", "null", "bool", "boolean", "int", "number", "float", "double", "string", "array")


class Type(enum.Enum):
    """A value type, serialised under its lower-case name."""

    ANY = "any"
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"

    @classmethod
    def from_json(cls, data: object) -> "Type":
        """Read a type from its name, an alias, a variant index or a one-key map."""
        if isinstance(data, bytes):
            return cls._from_name(data.decode("utf-8", errors="replace"))
        if isinstance(data, str):
            return cls._from_name(data)
        if isinstance(data, bool):
            raise TypeError_("invalid type: boolean, expected enum Type")
        if isinstance(data, int):
            members = list(cls)
            if 0 <= data < len(members):
                return members[data]
            raise TypeError_(
                f"invalid value: integer `{data}`, expected variant index 0 <= i < {len(members)}"
            )
        if isinstance(data, dict):
            if len(data) != 1:
                raise TypeError_("invalid type: map, expected enum Type")
            ((key, payload),) = data.items()
            variant = cls.from_json(key)
            if payload is not None:
                raise TypeError_("invalid type: expected unit variant")
            return variant
        raise TypeError_(f"invalid type: {type(data).__name__}, expected enum Type")

    @classmethod
    def _from_name(cls, name: str) -> "Type":
        try:
            return _ALIASES[name]
        except KeyError:
            expected = ", ".join(f"`{v}`" for v in _VARIANTS)
            raise TypeError_(f"unknown variant `{name}`, expected one of {expected}") from None

    def to_json(self) -> str:
        return self.value


_ALIASES: Dict[str, Type] = {
    "any": Type.ANY,
    "null": Type.NULL,
    "bool": Type.BOOL,
    "boolean": Type.BOOL,
    "int": Type.INT,
    "number": Type.INT,
    "float": Type.FLOAT,
    "double": Type.FLOAT,
    "string": Type.STRING,
    "array": Type.ARRAY,
}