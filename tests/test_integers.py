import pytest

from flagvalues.integers import (
    Int8Value,
    Int64Value,
    IntegerValue,
    Uint8Value,
    Uint16Value,
    Uint32Value,
    Uint64Value,
    UintValue,
    int8_conv,
    int64_conv,
    uint8_conv,
    uint16_conv,
    uint32_conv,
    uint64_conv,
    uint_conv,
)
from flagvalues.numbers import NumberError


def _max(value):
    if value.signed:
        return (1 << (value.bits - 1)) - 1
    return (1 << value.bits) - 1


def _min(value):
    return -(1 << (value.bits - 1)) if value.signed else 0


def test_default_is_stored():
    for value in (
        Int8Value(7),
        Int64Value(7),
        UintValue(7),
        Uint8Value(7),
        Uint16Value(7),
        Uint32Value(7),
        Uint64Value(7),
    ):
        assert value.value == 7
        assert str(value) == "7"


def test_set_round_trips_through_str():
    for value in (
        Int8Value(),
        Int64Value(),
        UintValue(),
        Uint8Value(),
        Uint16Value(),
        Uint32Value(),
        Uint64Value(),
    ):
        value.set("42")
        assert value.value == 42
        assert str(value) == "42"


def test_bounds_are_accepted():
    for value in (
        Int8Value(),
        Int64Value(),
        UintValue(),
        Uint8Value(),
        Uint16Value(),
        Uint32Value(),
        Uint64Value(),
    ):
        value.set(str(_max(value)))
        assert value.value == _max(value)
        value.set(str(_min(value)))
        assert value.value == _min(value)


def test_concrete_bounds():
    value = Int8Value()
    value.set("127")
    assert value.value == 127
    value = Uint16Value()
    value.set("65535")
    assert value.value == 65535


def test_above_max_clamps_and_raises():
    for value in (
        Int8Value(),
        Int64Value(),
        UintValue(),
        Uint8Value(),
        Uint16Value(),
        Uint32Value(),
        Uint64Value(),
    ):
        with pytest.raises(NumberError) as info:
            value.set(str(_max(value) + 1))
        assert info.value.out_of_range
        assert value.value == _max(value)


def test_below_min_clamps_and_raises():
    for value in (Int8Value(), Int64Value()):
        with pytest.raises(NumberError) as info:
            value.set(str(_min(value) - 1))
        assert info.value.out_of_range
        assert value.value == _min(value)


def test_unsigned_rejects_negative():
    for value in (
        UintValue(3),
        Uint8Value(3),
        Uint16Value(3),
        Uint32Value(3),
        Uint64Value(3),
    ):
        with pytest.raises(NumberError) as info:
            value.set("-1")
        assert not info.value.out_of_range
        assert value.value == 0


def test_bad_syntax_resets_to_zero():
    for value in (
        Int8Value(5),
        Int64Value(5),
        UintValue(5),
        Uint8Value(5),
        Uint16Value(5),
        Uint32Value(5),
        Uint64Value(5),
    ):
        with pytest.raises(NumberError):
            value.set("abc")
        assert value.value == 0


def test_empty_text_is_an_error():
    for value in (
        Int8Value(),
        Int64Value(),
        UintValue(),
        Uint8Value(),
        Uint16Value(),
        Uint32Value(),
        Uint64Value(),
    ):
        with pytest.raises(NumberError):
            value.set("")


def test_prefixes_agree_with_decimal():
    for value in (
        Int8Value(),
        Int64Value(),
        UintValue(),
        Uint8Value(),
        Uint16Value(),
        Uint32Value(),
        Uint64Value(),
    ):
        for text in ("31", "0x1f", "0X1F", "0o37", "037", "0b11111"):
            value.set(text)
            assert value.value == 31


def test_signed_negative_round_trip():
    for value in (Int8Value(), Int64Value()):
        value.set("-100")
        assert value.value == -100
        assert str(value) == "-100"


def test_conv_matches_value_set():
    for conv, value in (
        (int8_conv, Int8Value()),
        (int64_conv, Int64Value()),
        (uint_conv, UintValue()),
        (uint8_conv, Uint8Value()),
        (uint16_conv, Uint16Value()),
        (uint32_conv, Uint32Value()),
        (uint64_conv, Uint64Value()),
    ):
        text = str(_max(value))
        value.set(text)
        assert conv(text) == value.value


def test_conv_rejects_out_of_range():
    for conv, value in (
        (int8_conv, Int8Value()),
        (int64_conv, Int64Value()),
        (uint_conv, UintValue()),
        (uint8_conv, Uint8Value()),
        (uint16_conv, Uint16Value()),
        (uint32_conv, Uint32Value()),
        (uint64_conv, Uint64Value()),
    ):
        with pytest.raises(NumberError):
            conv(str(_max(value) + 1))


def test_conv_rejects_garbage():
    with pytest.raises(NumberError):
        int8_conv("12z")
    with pytest.raises(NumberError):
        int64_conv("12z")
    with pytest.raises(NumberError):
        uint_conv("12z")
    with pytest.raises(NumberError):
        uint8_conv("12z")
    with pytest.raises(NumberError):
        uint16_conv("12z")
    with pytest.raises(NumberError):
        uint32_conv("12z")
    with pytest.raises(NumberError):
        uint64_conv("12z")


def test_uint8_conv_value():
    assert uint8_conv("255") == 255


def test_int8_conv_negative_bound():
    assert int8_conv("-128") == -128


def test_base_class_is_signed_64_bit():
    value = IntegerValue()
    value.set(str((1 << 63) - 1))
    assert value.value == (1 << 63) - 1
    with pytest.raises(NumberError):
        value.set(str(1 << 63))


def test_int64_underscores_between_digits():
    value = Int64Value()
    value.set("1_000")
    assert value.value == 1000
    with pytest.raises(NumberError):
        value.set("1__000")