import json
import math

import pytest

from jsol.number import Number, NumberError
from jsol.value import (
    ArrayValue,
    BoolValue,
    NullValue,
    NumberValue,
    StringValue,
    value_from_json,
)
from jsol.valuetype import Type


def test_null():
    value = value_from_json(None)
    assert value == NullValue()
    assert value.type() is Type.NULL


def test_bool():
    value = value_from_json(True)
    assert value == BoolValue(True)
    assert value.type() is Type.BOOL


def test_int_and_float_types():
    assert value_from_json(3).type() is Type.INT
    assert value_from_json(3.0).type() is Type.FLOAT
    assert value_from_json(3) == NumberValue(Number.from_int(3))
    assert value_from_json(3) != value_from_json(3.0)


def test_string_and_array_types():
    assert value_from_json("x").type() is Type.STRING
    assert value_from_json([]).type() is Type.ARRAY


@pytest.mark.parametrize("data", [math.inf, -math.inf, math.nan])
def test_non_finite_float_becomes_null(data):
    assert value_from_json(data) == NullValue()


def test_out_of_range_int_rejected():
    with pytest.raises(NumberError):
        value_from_json(2**64)


def test_object_rejected():
    with pytest.raises(ValueError, match="expected any valid JSON value"):
        value_from_json({"a": 1})


def test_nested_array():
    value = value_from_json([1, [True, None], "s"])
    assert value == ArrayValue(
        [
            NumberValue(Number.from_int(1)),
            ArrayValue([BoolValue(True), NullValue()]),
            StringValue("s"),
        ]
    )


@pytest.mark.parametrize(
    "data",
    [None, False, 0, -7, 2**64 - 1, 1.25, "hello", [], [1, "a", [None, 2.5]]],
)
def test_json_round_trip(data):
    assert value_from_json(data).to_json() == data
    text = json.dumps(value_from_json(data).to_json())
    assert value_from_json(json.loads(text)) == value_from_json(data)


def test_debug_format():
    assert repr(NullValue()) == "Null"
    assert repr(BoolValue(True)) == "Bool(true)"
    assert repr(StringValue("abc")) == "String(abc)"
    assert repr(value_from_json([1, False])) == "Array [Number(1), Bool(false)]"


def test_values_are_hashable_and_equal_by_content():
    a = value_from_json([1, "x"])
    b = value_from_json([1, "x"])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1