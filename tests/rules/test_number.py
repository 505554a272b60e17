from decimal import Decimal

import pytest

from rulecheck.rules import Number


def test_get_name():
    assert Number().get_name() == "number"


def test_options():
    assert Number(min=1, as_integer=True).get_options() == {
        "min": 1,
        "max": None,
        "as_integer": True,
        "incorrect_input_message": {"template": "Value must be an integer.", "parameters": {}},
        "too_small_message": {"template": "Value must be no less than {min}.", "parameters": {"min": "1"}},
        "too_big_message": {"template": "Value must be no greater than {max}.", "parameters": {"max": "null"}},
        "skip_on_empty": False,
        "skip_on_error": False,
    }


def test_min_greater_than_max_is_rejected():
    with pytest.raises(ValueError):
        Number(min=5, max=1)


@pytest.mark.parametrize("value", [1, 5, 10, "5", " 1.5 ", "1e1", Decimal("2.5"), 7.25, "+3"])
def test_validation_passed(validator, value):
    assert validator.validate(value, Number(min=1, max=10)).is_valid


@pytest.mark.parametrize("value", [True, False, None, "", "abc", "1,5", [], {"a": 1}])
def test_non_numbers_fail(validator, value):
    assert validator.validate(value, Number()).get_error_messages() == ["Value must be a number."]


@pytest.mark.parametrize(
    "value,message",
    [
        (0, "Value must be no less than 1."),
        ("-3", "Value must be no less than 1."),
        (0.5, "Value must be no less than 1."),
        (11, "Value must be no greater than 10."),
        ("10.5", "Value must be no greater than 10."),
    ],
)
def test_out_of_range(validator, value, message):
    assert validator.validate(value, Number(min=1, max=10)).get_error_messages() == [message]


@pytest.mark.parametrize("value", [2, 2.0, "2", " -4 ", Decimal("3")])
def test_integers_passed(validator, value):
    assert validator.validate(value, Number(as_integer=True)).is_valid


@pytest.mark.parametrize("value", [2.5, "2.0", "1e3", "abc", True])
def test_integers_failed(validator, value):
    assert validator.validate(value, Number(as_integer=True)).get_error_messages() == ["Value must be an integer."]


def test_custom_messages(validator):
    rule = Number(
        max=3,
        incorrect_input_message="{attribute}: {value} is not numeric.",
        too_big_message="{attribute}: {value} is over {max}.",
    )
    result = validator.validate({"qty": "many", "limit": 4}, {"qty": rule, "limit": rule})
    assert result.get_error_messages_indexed_by_attribute() == {
        "qty": ["qty: many is not numeric."],
        "limit": ["limit: 4 is over 3."],
    }


@pytest.mark.parametrize("value", [float("nan"), Decimal("NaN"), Decimal("sNaN")])
def test_nan_is_not_a_number(validator, value):
    assert validator.validate(value, Number(min=0, max=10)).get_error_messages() == ["Value must be a number."]


def test_integer_strings_past_the_str_digit_limit(validator):
    assert validator.validate("9" * 5000, Number(max=10)).get_error_messages() == ["Value must be no greater than 10."]
    assert validator.validate("-" + "9" * 5000, Number(min=0)).get_error_messages() == ["Value must be no less than 0."]
    assert validator.validate("9" * 5000, Number(min=0, as_integer=True)).is_valid


def test_integers_past_the_str_digit_limit_render_in_messages(validator):
    rule = Number(max=10, too_big_message="{value} is over {max}.")
    (message,) = validator.validate(10 ** 5000, rule).get_error_messages()
    assert message == "1" + "0" * 5000 + " is over 10."
