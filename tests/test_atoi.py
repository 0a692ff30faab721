import pytest

from sigtalk.atoi import parse_int


@pytest.mark.parametrize("number", [0, 7, 42, -42, 123456, -99999])
def test_round_trip_of_plain_numbers(number):
    assert parse_int(str(number)) == number


@pytest.mark.parametrize("space", list("\t\n\v\f\r "))
def test_leading_whitespace_is_skipped(space):
    assert parse_int(space * 3 + "-15") == parse_int("-15")


def test_trailing_text_is_ignored():
    assert parse_int("314abc") == parse_int("314")


def test_plus_sign_is_accepted():
    assert parse_int("+8") == parse_int("8")


def test_minus_sign_negates():
    assert parse_int("-271") == -parse_int("271")


@pytest.mark.parametrize(
    "text", ["", "abc", "-", "+", "--5", "+-5", "- 5", "\u00a05", "\u0663"]
)
def test_text_without_leading_digits_gives_zero(text):
    assert parse_int(text) == 0