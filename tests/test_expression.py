from __future__ import annotations

import pytest

from slight.errors import NoInput, ParseError
from slight.expression import Absolute, By, Relative, To, looks_like_expression, parse


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("50", To(Absolute(50))),
        ("0", To(Absolute(0))),
        ("30%", To(Relative(30.0))),
        ("12.5%", To(Relative(12.5))),
        ("+10", By(1, Absolute(10))),
        ("-10", By(-1, Absolute(10))),
        ("+5%", By(1, Relative(5.0))),
        ("-2.5%", By(-1, Relative(2.5))),
        (" 7 ", To(Absolute(7))),
    ],
)
def test_parse(text: str, expected) -> None:
    assert parse(text) == expected


@pytest.mark.parametrize("text", [None, "", "   "])
def test_missing_input(text) -> None:
    with pytest.raises(NoInput):
        parse(text)


@pytest.mark.parametrize("text", ["abc", "1.5", "--5", "5%%", "+-3", "%", "10 %", "0x10"])
def test_malformed_input(text: str) -> None:
    with pytest.raises(ParseError):
        parse(text)


def test_sign_must_be_unit() -> None:
    with pytest.raises(ValueError):
        By(2, Absolute(1))


def test_looks_like_expression() -> None:
    assert looks_like_expression("-10%")
    assert not looks_like_expression("-v")


def test_huge_percent_is_capped() -> None:
    assert parse("9" * 400 + "%") == To(Relative(100.0))
    assert parse("-250%") == By(-1, Relative(100.0))


def test_huge_absolute_value_is_rejected() -> None:
    assert parse("9" * 18) == To(Absolute(10**18 - 1))
    with pytest.raises(ParseError):
        parse("+" + "9" * 5000)
