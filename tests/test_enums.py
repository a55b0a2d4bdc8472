from enum import Enum

import pytest

from sc2bot.enums import ParseEnumError, checker_name, parse_enum, variant_checkers


class Color(Enum):
    Red = 3
    DarkGreen = 7
    MineralField450 = 11


@variant_checkers
class Shape(Enum):
    Circle = 1
    SquareBox = 2
    Hex6Grid = 3


def test_parse_error_message():
    assert str(ParseEnumError()) == "failed to parse enum"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_enum(Color, "Purple")


@pytest.mark.parametrize("member", list(Color))
def test_parse_by_name_round_trip(member):
    assert parse_enum(Color, member.name) is member


@pytest.mark.parametrize("member", list(Color))
def test_parse_by_number_round_trip(member):
    assert parse_enum(Color, str(member.value), use_primitives=True) is member


def test_parse_number_rejected_without_primitives():
    with pytest.raises(ParseEnumError):
        parse_enum(Color, str(Color.Red.value))


def test_parse_unknown_number_rejected():
    with pytest.raises(ParseEnumError):
        parse_enum(Color, "1000", use_primitives=True)


@pytest.mark.parametrize("text", ["Purple", "red", " Red", "Red ", "", "3.0", "0x3"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ParseEnumError):
        parse_enum(Color, text, use_primitives=True)


def test_parse_signed_number():
    assert parse_enum(Color, "+" + str(Color.DarkGreen.value), True) is Color.DarkGreen


def test_checker_name_simple():
    assert checker_name("Success") == "is_success"


def test_checker_name_multi_word():
    assert checker_name("CantFindCancelOrder") == "is_cant_find_cancel_order"


def test_checker_name_digits():
    assert checker_name("KD8Charge") == "is_k_d8_charge"


def test_checker_name_accepts_member():
    assert checker_name(Color.DarkGreen) == checker_name("DarkGreen")


@pytest.mark.parametrize("member", list(Color))
def test_checker_name_is_lower_snake(member):
    name = checker_name(member)
    assert name.startswith("is_")
    assert name == name.lower()
    assert name.replace("_", "") == "is" + member.name.lower()


@pytest.mark.parametrize("member", list(Shape))
def test_variant_checkers_true_for_own_member(member):
    assert getattr(member, checker_name(member))() is True


@pytest.mark.parametrize("member", list(Shape))
def test_variant_checkers_false_for_other_members(member):
    others = [m for m in Shape if m is not member]
    assert all(getattr(other, checker_name(member))() is False for other in others)


def test_variant_checkers_returns_same_class():
    decorated = variant_checkers(Color)
    assert decorated is Color
    assert Color.Red.is_red() and not Color.Red.is_dark_green()