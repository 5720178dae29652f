import pytest

from rustlings.solutions.errors import (
    CreationError,
    NegativeError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    parse_pos_nonzero,
    purchase,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_item_quantity_too_large_for_i32():
    with pytest.raises(ValueError) as info:
        total_cost("3000000000")
    assert str(info.value) == "number too large to fit in target type"


def test_total_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("1000000000")


def test_purchase_affordable(capsys):
    assert purchase(100, "8") == 59
    assert "You now have 59 tokens." in capsys.readouterr().out


def test_purchase_not_affordable(capsys):
    assert purchase(10, "8") == 10
    assert "You can't afford that many!" in capsys.readouterr().out


def test_purchase_bad_input():
    with pytest.raises(ValueError):
        purchase(100, "eight")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="^number is negative$"):
        PositiveNonzeroInteger(-1)
    with pytest.raises(CreationError, match="^number is zero$"):
        PositiveNonzeroInteger(0)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, NegativeError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, ZeroError)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)