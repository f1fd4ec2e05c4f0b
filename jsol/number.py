"""Exact JSON numbers: unsigned and negative 64-bit integers and finite floats."""

from __future__ import annotations

import enum
import math
from decimal import Decimal
from typing import Optional, Union

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class NumberError(ValueError):
    """Raised when a value cannot be represented as a JSON number."""


class _Kind(enum.Enum):
    POS_INT = "pos_int"
    NEG_INT = "neg_int"
    FLOAT = "float"


def _format_float(value: float) -> str:
    """Format a finite float with the shortest round-trip digits."""
    if value == 0.0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"
    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    exponent = int(parts.exponent)
    length = len(digits)
    magnitude = length + exponent
    if exponent >= 0 and magnitude <= 16:
        body = digits + "0" * exponent + ".0"
    elif 0 < magnitude <= 16:
        body = f"{digits[:magnitude]}.{digits[magnitude:]}"
    elif -5 < magnitude <= 0:
        body = "0." + "0" * -magnitude + digits
    elif length == 1:
        body = f"{digits}e{magnitude - 1}"
    else:
        body = f"{digits[0]}.{digits[1:]}e{magnitude - 1}"
    return sign + body


class Number:
    """A JSON number that remembers whether it is an integer or a float."""

    __slots__ = ("_kind", "_value")

    def __init__(self, value: Union[int, float]) -> None:
        if isinstance(value, bool):
            raise NumberError("a boolean is not a JSON number")
        if isinstance(value, int):
            if 0 <= value <= _U64_MAX:
                self._kind = _Kind.POS_INT
            elif _I64_MIN <= value < 0:
                self._kind = _Kind.NEG_INT
            else:
                raise NumberError("JSON number out of range")
            self._value: Union[int, float] = value
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise NumberError("not a JSON number")
            self._kind = _Kind.FLOAT
            self._value = value
        else:
            raise NumberError(f"invalid type: {type(value).__name__}, expected a JSON number")

    @classmethod
    def from_int(cls, value: int) -> "Number":
        """Build an integer number; raises NumberError outside the 64-bit ranges."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise NumberError(f"expected an integer, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_f64(cls, value: float) -> Optional["Number"]:
        """Build a float number, or return None if the value is not finite."""
        value = float(value)
        if not math.isfinite(value):
            return None
        return cls(value)

    @classmethod
    def from_i128(cls, value: int) -> Optional["Number"]:
        """Build an integer number, or return None if it fits neither u64 nor i64."""
        if 0 <= value <= _U64_MAX or _I64_MIN <= value < 0:
            return cls(int(value))
        return None

    @classmethod
    def from_u128(cls, value: int) -> Optional["Number"]:
        """Build an unsigned number, or return None if it does not fit in u64."""
        if 0 <= value <= _U64_MAX:
            return cls(int(value))
        return None

    @classmethod
    def from_json(cls, data: object) -> "Number":
        """Build a number from a decoded JSON value."""
        if isinstance(data, bool):
            raise NumberError("invalid type: boolean, expected a JSON number")
        if isinstance(data, int):
            number = cls.from_i128(data)
            if number is None:
                raise NumberError("JSON number out of range")
            return number
        if isinstance(data, float):
            number = cls.from_f64(data)
            if number is None:
                raise NumberError("not a JSON number")
            return number
        raise NumberError(f"invalid type: {type(data).__name__}, expected a JSON number")

    def is_i64(self) -> bool:
        if self._kind is _Kind.POS_INT:
            return self._value <= _I64_MAX
        return self._kind is _Kind.NEG_INT

    def is_u64(self) -> bool:
        return self._kind is _Kind.POS_INT

    def is_f64(self) -> bool:
        return self._kind is _Kind.FLOAT

    def as_i64(self) -> Optional[int]:
        return int(self._value) if self.is_i64() else None

    def as_u64(self) -> Optional[int]:
        return int(self._value) if self._kind is _Kind.POS_INT else None

    def as_f64(self) -> float:
        return float(self._value)

    def as_i128(self) -> Optional[int]:
        return None if self._kind is _Kind.FLOAT else int(self._value)

    def as_u128(self) -> Optional[int]:
        return self.as_u64()

    def to_json(self) -> Union[int, float]:
        """Return the plain int or float for JSON encoding."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __str__(self) -> str:
        if self._kind is _Kind.FLOAT:
            return _format_float(float(self._value))
        return str(self._value)

    def __repr__(self) -> str:
        return f"Number({self})"