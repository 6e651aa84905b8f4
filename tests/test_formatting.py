"""Tests for pt-BR currency and number formatting."""

import math

import pytest

from valor_causa.formatting import format_currency, format_number


def test_currency_zero_and_missing_are_equal():
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(None) == "R$ 0,00"
    assert format_currency(math.nan) == "R$ 0,00"


def test_currency_grouping():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(1000) == "R$ 1.000,00"
    assert format_currency(1234567.891) == "R$ 1.234.567,89"


def test_currency_rounds_half_up():
    assert format_currency(0.005) == "R$ 0,01"
    assert format_currency(1.005) == "R$ 1,01"


def test_currency_negative():
    assert format_currency(-1234.5) == "-R$ 1.234,50"
    assert format_currency(-0.001) == "R$ 0,00"


@pytest.mark.parametrize("value", ["abc", "", [], {}, float("inf"), "nan", "-inf", 10**400])
def test_currency_is_total(value):
    assert format_currency(value) == "R$ 0,00"


def test_currency_accepts_numeric_strings():
    assert format_currency("200") == "R$ 200,00"


def test_number_formatting():
    assert format_number(5) == "5"
    assert format_number(5.0) == "5"
    assert format_number(1234.5) == "1.234,5"
    assert format_number(1234567) == "1.234.567"
    assert format_number(0.12345) == "0,123"
    assert format_number(-2500) == "-2.500"


def test_number_missing_is_zero():
    assert format_number(None) == "0"
    assert format_number(math.nan) == "0"
    assert format_number("n/a") == "0"


@pytest.mark.parametrize("value", ["nan", "inf", "1e400", 10**400, -10**400])
def test_number_is_total(value):
    assert format_number(value) == "0"
