import pytest

from flagvalues.maps import (
    StringToInt64Value,
    StringToIntValue,
    string_to_int64_conv,
    string_to_int_conv,
)
from flagvalues.numbers import NumberError
from flagvalues.values import FlagValueError


def _flag_text(values):
    return ",".join(f"{key}={number}" for key, number in values.items())


def test_empty():
    for flag, conv in (
        (StringToIntValue({}), string_to_int_conv),
        (StringToInt64Value({}), string_to_int64_conv),
    ):
        assert flag.value == {}
        assert conv(str(flag)) == {}


def test_set_values():
    vals = {"a": 1, "b": 2, "d": 4, "c": 3}
    for flag, conv in (
        (StringToIntValue({}), string_to_int_conv),
        (StringToInt64Value({}), string_to_int64_conv),
    ):
        flag.set(_flag_text(vals))
        assert flag.value == vals
        assert conv(str(flag)) == vals


def test_default():
    for flag, conv in (
        (StringToIntValue({"a": 1, "b": 2}), string_to_int_conv),
        (StringToInt64Value({"a": 1, "b": 2}), string_to_int64_conv),
    ):
        assert flag.value == {"a": 1, "b": 2}
        assert conv(str(flag)) == {"a": 1, "b": 2}


def test_with_default():
    for flag, conv in (
        (StringToIntValue({"a": 1, "b": 2}), string_to_int_conv),
        (StringToInt64Value({"a": 1, "b": 2}), string_to_int64_conv),
    ):
        flag.set("a=1,b=2")
        assert flag.value == {"a": 1, "b": 2}
        assert conv(str(flag)) == {"a": 1, "b": 2}


def test_set_replaces_default_first():
    for flag in (StringToIntValue({"x": 9}), StringToInt64Value({"x": 9})):
        flag.set("a=5")
        assert flag.value == {"a": 5}


def test_called_twice():
    for flag in (StringToIntValue({}), StringToInt64Value({})):
        flag.set("a=1,b=2")
        flag.set("b=3")
        assert flag.value == {"a": 1, "b": 3}


def test_string_form():
    flag = StringToIntValue({"a": 1, "b": -2})
    assert str(flag) == "[a=1,b=-2]"
    assert str(StringToIntValue()) == "[]"


def test_missing_equals_raises():
    flag = StringToIntValue({"a": 1})
    with pytest.raises(FlagValueError, match="^b must be formatted as key=value$"):
        flag.set("a=2,b")
    assert flag.value == {"a": 1}


def test_bad_number_raises():
    with pytest.raises(NumberError):
        StringToInt64Value().set("a=x")


def test_prefixes_not_accepted():
    with pytest.raises(NumberError):
        StringToIntValue().set("a=0x10")


def test_value_may_contain_equals():
    with pytest.raises(NumberError):
        StringToIntValue().set("a=1=2")


def test_out_of_range():
    with pytest.raises(NumberError):
        StringToInt64Value().set("a=9223372036854775808")
    flag = StringToInt64Value()
    flag.set("a=-9223372036854775808")
    assert flag.value == {"a": -9223372036854775808}


def test_conv_errors():
    with pytest.raises(FlagValueError, match="must be formatted"):
        string_to_int_conv("[a]")
    with pytest.raises(NumberError):
        string_to_int64_conv("[a=b]")


def test_type_names():
    assert StringToIntValue().type_name == "stringToInt"
    assert StringToInt64Value().type_name == "stringToInt64"