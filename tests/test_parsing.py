# tests/test_parsing.py

import pytest

from kurdcal.core.errors import DateParseError, OutOfRangeError
from kurdcal.parsing import parse_date, parse_ymd


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15/01/2725", (2725, 1, 15)),
        ("2725-01-15", (2725, 1, 15)),
        ("2725.1.15", (2725, 1, 15)),
        ("15 Xakelêwe 2725", (2725, 1, 15)),
        ("15 xakelêwe 2725", (2725, 1, 15)),
        ("Hênî, 1 Xakelêwe 2725", (2725, 1, 1)),
        ("3 Rêb 2705", (2705, 11, 3)),
        ("  9 Reşeme 2724 ", (2724, 12, 9)),
    ],
)
def test_parse_latin(text, expected):
    assert parse_ymd(text) == expected


def test_parse_arabic_script():
    assert parse_ymd("٢٧٢٥/٠١/١٥", "sorani-arabic") == (2725, 1, 15)
    assert parse_ymd("٢٧٢٥ خاکەلێوە ١٥", "sorani-arabic") == (2725, 1, 15)
    assert parse_ymd("١ نەورۆز ٢٧٢٥", "hawrami-arabic") == (2725, 1, 1)


def test_ambiguous_order_follows_direction():
    assert parse_ymd("01/02/03") == (3, 2, 1)
    assert parse_ymd("01/02/03", "kurmanji-arabic") == (1, 2, 3)


@pytest.mark.parametrize("text", ["", "   ", "hello", "1/2", "15 Gulan", "99/99/2725"])
def test_unparseable(text):
    with pytest.raises(DateParseError):
        parse_ymd(text)


def test_parse_date_checks_the_calendar(simplified, erbil):
    d = parse_date("30 Reşeme 2728", simplified)
    assert d.ymd == (2728, 12, 30)
    with pytest.raises(OutOfRangeError):
        parse_date("30 Reşeme 2725", simplified)
    a = parse_date("2725-01-01", erbil)
    assert a.kind == "astronomical"
    assert a.longitude == 44.0


def test_month_names_come_from_the_selected_dialect_only():
    assert parse_ymd("15 Newroz 2725", "hawrami-latin") == (2725, 1, 15)
    with pytest.raises(DateParseError):
        parse_ymd("15 Newroz 2725", "sorani-latin")
    with pytest.raises(DateParseError):
        parse_ymd("15 Xakelêwe 2725", "hawrami-latin")


def test_abbreviations_with_a_numeral():
    assert parse_ymd("١ گەل١ ٢٧٢٥", "hawrami-arabic") == (2725, 5, 1)
    assert parse_ymd("1 Gel2 2725", "hawrami-latin") == (2725, 8, 1)
