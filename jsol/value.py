"""Script values: null, booleans, numbers, strings and arrays."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple

from .number import Number
from .valuetype import Type


class Value(abc.ABC):
    """A JSON-compatible script value."""

    @abc.abstractmethod
    def type(self) -> Type:
        """The type tag of this value."""

    @abc.abstractmethod
    def to_json(self) -> Any:
        """The plain Python data for JSON encoding."""


@dataclass(frozen=True, repr=False)
class NullValue(Value):
    def type(self) -> Type:
        return Type.NULL

    def to_json(self) -> None:
        return None

    def __repr__(self) -> str:
        return "Null"


@dataclass(frozen=True, repr=False)
class BoolValue(Value):
    value: bool

    def type(self) -> Type:
        return Type.BOOL

    def to_json(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"Bool({'true' if self.value else 'false'})"


@dataclass(frozen=True, repr=False)
class NumberValue(Value):
    value: Number

    def type(self) -> Type:
        return Type.FLOAT if self.value.is_f64() else Type.INT

    def to_json(self) -> Any:
        return self.value.to_json()

    def __repr__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, repr=False)
class StringValue(Value):
    value: str

    def type(self) -> Type:
        return Type.STRING

    def to_json(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"String({self.value})"


@dataclass(frozen=True, repr=False)
class ArrayValue(Value):
    items: Tuple[Value, ...] = field(default_factory=tuple)

    def __init__(self, items: Iterable[Value] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def type(self) -> Type:
        return Type.ARRAY

    def to_json(self) -> list:
        return [item.to_json() for item in self.items]

    def __repr__(self) -> str:
        return "Array [" + ", ".join(repr(item) for item in self.items) + "]"


def value_from_json(data: object) -> Value:
    """Convert decoded JSON data into a Value.

    Non-finite floats become null; integers outside the 64-bit ranges and
    JSON objects are rejected.
    """
    if data is None:
        return NullValue()
    if isinstance(data, bool):
        return BoolValue(data)
    if isinstance(data, (int, float)):
        if isinstance(data, float):
            number = Number.from_f64(data)
            return NullValue() if number is None else NumberValue(number)
        return NumberValue(Number.from_json(data))
    if isinstance(data, str):
        return StringValue(data)
    if isinstance(data, (list, tuple)):
        return ArrayValue(value_from_json(item) for item in data)
    raise ValueError(f"invalid type: {type(data).__name__}, expected any valid JSON value")