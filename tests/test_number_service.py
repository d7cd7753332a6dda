"""Test: Normalisierung der Beträge"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rca_report.pdf_reader.services.number_service import normalize, parse_int, parse_number


def test_comma_as_decimal_separator():
    """Test: 1.234,56 -> Punkte sind Tausendertrenner"""
    assert normalize("1.234,56") == 1234.56
    assert normalize("10,5") == 10.5
    assert normalize("1.000.000,00") == 1000000.0


def test_comma_as_thousands_separator():
    """Test: 1,234 -> drei Ziffern nach dem Komma"""
    assert normalize("1,234") == 1234
    assert normalize("1,234,567") == 1234567
    # Punkt bleibt stehen, wenn das Komma kein Dezimaltrenner ist
    assert normalize("1,234.56") == 1234.56


def test_period_decimal_and_grouping():
    assert normalize("1234.5") == 1234.5
    assert normalize("1234.56") == 1234.56
    assert normalize("12.345") == 12345
    assert normalize("1.234.567") == 1234567


def test_currency_marker_and_whitespace():
    assert normalize("R$ 1.234,56") == 1234.56
    assert normalize("  R$1 234,56 ") == 1234.56


def test_plain_and_missing_values():
    assert normalize("42") == 42
    assert normalize(None) == 0
    assert normalize("") == 0


def test_unreadable_values_become_zero():
    assert normalize("abc") == 0
    assert normalize("1,2,34") == 0
    assert normalize("1_000") == 0
    assert normalize("inf") == 0


def test_parse_int_is_lenient():
    """Test: Ganzzahlen wie parseInt (führende Ziffern zählen)"""
    assert parse_int("007").or_default(0) == 7
    assert parse_int("12abc").value == 12
    assert not parse_int("abc").ok
    assert not parse_int(None).ok
    assert parse_int("x").or_default(0) == 0


def test_parse_number_rejects_non_finite():
    assert parse_number("1e3").value == 1000.0
    assert not parse_number("nan").ok
    assert not parse_number("1e999").ok


def test_parse_int_oversized_digit_string_does_not_raise():
    """Test: Riesige Zahlen (mehr Ziffern als int() erlaubt) fallen auf 0 zurück"""
    result = parse_int("9" * 5000)
    if hasattr(sys, "get_int_max_str_digits"):
        assert not result.ok
        assert result.or_default(0) == 0
    else:
        assert result.ok
