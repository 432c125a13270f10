import pytest

from mlcore.path import Path
from mlcore.symbol import Symbol
from mlcore.value import NamedValue, Value, ValueType


def test_default_is_undefined():
    v = Value()
    assert v.type is ValueType.UNDEFINED
    assert not v
    assert str(v) == "[undefined]"
    assert v == Value()


@pytest.mark.parametrize("number", [1.5, -2.0, 0.25, 100])
def test_numbers_become_floats(number):
    v = Value(number)
    assert v.type is ValueType.FLOAT
    assert v.get_float() == number
    assert bool(v)


def test_bool_becomes_float():
    assert Value(True).type is ValueType.FLOAT
    assert Value(True).get_float() == 1.0
    assert Value(False).get_bool() is False


def test_float_is_single_precision():
    v = Value(0.1)
    assert abs(v.get_float() - 0.1) < 1e-7
    assert v.get_float() != 0.1
    assert Value(v.get_float()) == v


def test_get_int_truncates():
    assert Value(3.7).get_int() == 3
    assert Value(-3.7).get_int() == -3


def test_text_value():
    v = Value("hello")
    assert v.type is ValueType.TEXT
    assert v.get_text() == "hello"
    assert str(v) == "hello"
    assert Value(Symbol("hello")) == v


def test_defaults_apply_only_to_other_types():
    text = Value("x")
    assert text.get_float(2.5) == 2.5
    assert text.get_int(7) == 7
    assert text.get_bool(True) is True
    assert text.get_unsigned_long(9) == 9
    assert Value(4.0).get_text("fallback") == "fallback"
    assert Value(4.0).get_float(2.5) == 4.0
    assert Value("x").get_text("fallback") == "x"


def test_getters_without_default_on_wrong_type():
    assert Value("x").get_float() == 0.0
    assert Value(1.0).get_text() == ""
    assert Value(1.0).get_unsigned_long() == 0


def test_unsigned_long():
    v = Value.unsigned_long(4000000000)
    assert v.type is ValueType.UNSIGNED_LONG
    assert v.get_unsigned_long() == 4000000000
    assert str(v) == "4000000000"
    assert v == Value.unsigned_long(4000000000)
    assert v != Value(4000000000.0)


@pytest.mark.parametrize("bad", [-1, 1 << 32])
def test_unsigned_long_out_of_range(bad):
    with pytest.raises(ValueError):
        Value.unsigned_long(bad)


def test_blob():
    data = bytes(range(10))
    v = Value.blob(data)
    assert v.type is ValueType.BLOB
    assert v.get_blob() == data
    assert str(v) == "[blob]"
    assert v != Value.blob(data)
    assert Value(1.0).get_blob() == b""


def test_blob_too_large():
    with pytest.raises(ValueError):
        Value.blob(bytes(513))
    assert len(Value.blob(bytes(512)).get_blob()) == 512


def test_different_types_are_unequal():
    assert Value(1.0) != Value("1")
    assert Value() != Value(0.0)


def test_copy_constructor():
    original = Value("copy me")
    assert Value(original) == original
    assert Value(original).type is ValueType.TEXT


def test_sequences():
    assert Value([]) == Value()
    assert Value([2.0]) == Value(2.0)
    with pytest.raises(ValueError):
        Value([1.0, 2.0])


def test_unsupported_type():
    with pytest.raises(TypeError):
        Value(b"bytes")


def test_type_symbol():
    assert Value().type_symbol() == Symbol("undefined")
    assert Value(1.0).type_symbol() == Symbol("float")
    assert Value("t").type_symbol() == Symbol("text")


def test_equal_values_hash_equal():
    assert hash(Value("a")) == hash(Value("a"))
    assert len({Value(1.0), Value(1), Value(True)}) == 1


def test_named_value():
    nv = NamedValue(Path("a/b"), Value(3.0))
    assert nv.name == Path("a", "b")
    assert nv.value.get_float() == 3.0
    empty = NamedValue()
    assert not empty.name
    assert not empty.value