"""Raw script modules as they are stored on disk in JSON form."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .value import Value, value_from_json


class ParseError(ValueError):
    """Raised when JSON data does not describe a valid raw module."""


def _expect_object(data: object, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ParseError(f"invalid type: {type(data).__name__}, expected {what}")
    return data


def _parse_value(data: object) -> Value:
    try:
        return value_from_json(data)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


@dataclass
class RawConstant:
    """A named constant declared by a module."""

    name: str
    value: Value

    @classmethod
    def from_json(cls, data: object) -> "RawConstant":
        obj = _expect_object(data, "struct RawConstant")
        for key in ("name", "value"):
            if key not in obj:
                raise ParseError(f"missing field `{key}`")
        name = obj["name"]
        if not isinstance(name, str):
            raise ParseError(f"invalid type: {type(name).__name__}, expected a string")
        return cls(name, _parse_value(obj["value"]))

    def to_json(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value.to_json()}


class RawOperation(enum.Enum):
    """An operation as written in a module file, tagged by its ``type`` field."""

    NOP = "nop"

    @classmethod
    def from_json(cls, data: object) -> "RawOperation":
        obj = _expect_object(data, "internally tagged enum RawOperation")
        if "type" not in obj:
            raise ParseError("missing field `type`")
        tag = obj["type"]
        if isinstance(tag, str):
            for member in cls:
                if member.value == tag:
                    return member
        expected = ", ".join(f"`{member.value}`" for member in cls)
        raise ParseError(f"unknown variant `{tag}`, expected {expected}")

    def to_json(self) -> Dict[str, Any]:
        return {"type": self.value}


class ModuleKind(enum.Enum):
    """Whether a module is a program entry point or a library module."""

    ENTRYPOINT = "entrypoint"
    MODULE = "module"


def _parse_operations(data: object) -> List[RawOperation]:
    if not isinstance(data, list):
        raise ParseError(f"invalid type: {type(data).__name__}, expected a sequence")
    return [RawOperation.from_json(item) for item in data]


def _parse_constants(data: object) -> List[RawConstant]:
    if not isinstance(data, list):
        raise ParseError(f"invalid type: {type(data).__name__}, expected a sequence")
    return [RawConstant.from_json(item) for item in data]


@dataclass
class RawJsolModule:
    """A module file: its kind, its operations and its constants.

    An entry point always has a list of operations; a plain module may have
    none at all (``operations`` is then ``None``).
    """

    kind: ModuleKind
    operations: Optional[List[RawOperation]] = None
    constants: List[RawConstant] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind is ModuleKind.ENTRYPOINT and self.operations is None:
            self.operations = []

    @classmethod
    def from_json(cls, data: object) -> "RawJsolModule":
        obj = _expect_object(data, "internally tagged enum RawJsolModule")
        if "type" not in obj:
            raise ParseError("missing field `type`")
        tag = obj["type"]
        kind = next((k for k in ModuleKind if isinstance(tag, str) and k.value == tag), None)
        if kind is None:
            expected = ", ".join(f"`{k.value}`" for k in ModuleKind)
            raise ParseError(f"unknown variant `{tag}`, expected one of {expected}")

        raw_ops = obj.get("operations")
        if kind is ModuleKind.ENTRYPOINT:
            operations: Optional[List[RawOperation]] = (
                _parse_operations(raw_ops) if "operations" in obj else []
            )
        else:
            operations = None if raw_ops is None else _parse_operations(raw_ops)

        constants = _parse_constants(obj["constants"]) if "constants" in obj else []
        return cls(kind, operations, constants)

    def to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.kind.value}
        if self.kind is ModuleKind.ENTRYPOINT:
            out["operations"] = [op.to_json() for op in self.operations or []]
            out["constants"] = [c.to_json() for c in self.constants]
        else:
            if self.operations is not None:
                out["operations"] = [op.to_json() for op in self.operations]
            if self.constants:
                out["constants"] = [c.to_json() for c in self.constants]
        return out

    @classmethod
    def loads(cls, text: str) -> "RawJsolModule":
        """Parse a module from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(str(exc)) from exc
        return cls.from_json(data)

    def dumps(self) -> str:
        """Render the module as indented JSON text."""
        return json.dumps(self.to_json(), indent=2, ensure_ascii=False)