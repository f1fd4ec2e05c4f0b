import pytest

from jsol.valuetype import Type, TypeError_


@pytest.mark.parametrize(
    "name, expected",
    [
        ("any", Type.ANY),
        ("null", Type.NULL),
        ("bool", Type.BOOL),
        ("boolean", Type.BOOL),
        ("int", Type.INT),
        ("number", Type.INT),
        ("float", Type.FLOAT),
        ("double", Type.FLOAT),
        ("string", Type.STRING),
        ("array", Type.ARRAY),
    ],
)
def test_names_and_aliases(name, expected):
    assert Type.from_json(name) is expected


@pytest.mark.parametrize("member", list(Type))
def test_round_trip(member):
    assert Type.from_json(member.to_json()) is member


def test_serialised_names():
    assert Type.BOOL.to_json() == "bool"
    assert Type.FLOAT.to_json() == "float"


def test_bytes_names():
    assert Type.from_json(b"double") is Type.FLOAT


def test_variant_index():
    assert Type.from_json(0) is Type.ANY
    assert Type.from_json(6) is Type.ARRAY
    assert [Type.from_json(i) for i in range(7)] == list(Type)


def test_variant_index_out_of_range():
    with pytest.raises(TypeError_, match="variant index 0 <= i < 7"):
        Type.from_json(7)


def test_unknown_variant():
    with pytest.raises(TypeError_, match="unknown variant `integer`"):
        Type.from_json("integer")


def test_unit_variant_map():
    assert Type.from_json({"string": None}) is Type.STRING
    with pytest.raises(TypeError_):
        Type.from_json({"string": 1})
    with pytest.raises(TypeError_):
        Type.from_json({"string": None, "int": None})


@pytest.mark.parametrize("data", [True, None, 1.5, ["int"]])
def test_invalid_types(data):
    with pytest.raises(TypeError_):
        Type.from_json(data)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        Type.from_json("nope")