"""Test: Zeilen-Klassifizierung und Feld-Extraktion"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rca_report.pdf_reader.patterns import LAYOUT_A, LAYOUT_B
from rca_report.pdf_reader.services.line_extractor import (
    LineKind,
    classify_line,
    extract_records,
    match_layout,
    scan_report,
    split_lines,
)

LINE_A = "123 ACME CORP 1 2 3 10,50 4 5 100,00 200,50"
LINE_B = "JOAO DA SILVA 10 20 30 40 123 1.234,56"


def test_split_lines_normalizes_whitespace():
    text = "  a   b \r\n\r\nc\td\n\n   \re  "
    assert split_lines(text) == ["a b", "c d", "e"]
    assert split_lines(None) == []
    assert split_lines("") == []


def test_classify_header_lines():
    assert classify_line("315 - Vendas por RCA") is LineKind.SKIP
    assert classify_line("Período: 01/10/2026 a 17/10/2026") is LineKind.SKIP
    assert classify_line("PERIODO 10/2026") is LineKind.SKIP
    assert classify_line("Código Rca Nome Cli. Posit. Mix Venda") is LineKind.SKIP
    assert classify_line("Página 1 de 3") is LineKind.SKIP


def test_classify_stop_lines():
    assert classify_line("Total do Supervisor 10 20 30") is LineKind.STOP
    assert classify_line("Estatística de vendas") is LineKind.STOP
    assert classify_line("ESTATISTICA") is LineKind.STOP


def test_classify_candidate():
    assert classify_line(LINE_A) is LineKind.CANDIDATE
    # "3150" is not the report code
    assert classify_line("3150 ACME") is LineKind.CANDIDATE


def test_layout_a_line():
    """Test: Layout A (Código zuerst)"""
    layout, _ = match_layout(LINE_A)
    assert layout is LAYOUT_A

    [record] = extract_records(LINE_A)
    assert record.rca == "123"
    assert record.name == "ACME CORP"
    assert record.cliPosit == 2
    assert record.mix == 5
    assert record.sales == 200.5


def test_layout_a_tolerates_trailing_text():
    [record] = extract_records(LINE_A + " 99 XYZ")
    assert record.rca == "123"
    assert record.sales == 200.5


def test_layout_a_requires_all_fields():
    assert match_layout("123 ACME CORP 1 2 3 10,50 4 5 100,00") is None
    assert extract_records("123 ACME CORP 1 2 3 10,50 4 5 100,00") == []


def test_layout_a_strips_leading_zeros_from_rca():
    [record] = extract_records("0042 JOSÉ ÁVILA 1 2 3 10,50 4 5 100,00 1.500,00")
    assert record.rca == "42"
    assert record.name == "JOSÉ ÁVILA"
    assert record.sales == 1500.0


def test_layout_a_drops_zero_rca():
    assert extract_records("000 ACME CORP 1 2 3 10,50 4 5 100,00 200,50") == []
    result = scan_report("000 ACME CORP 1 2 3 10,50 4 5 100,00 200,50")
    assert result.stats.discarded == 1


def test_layout_b_line():
    """Test: Layout B (Name zuerst)"""
    layout, _ = match_layout(LINE_B)
    assert layout is LAYOUT_B

    [record] = extract_records(LINE_B)
    assert record.name == "JOAO DA SILVA"
    assert record.cliPosit == 20
    assert record.mix == 30
    assert record.rca == "123"
    assert record.sales == 1234.56


def test_layout_b_keeps_zero_rca():
    [record] = extract_records("JOAO DA SILVA 10 20 30 40 0 99,90")
    assert record.rca == ""
    assert record.sales == 99.9


def test_unmatched_lines_are_dropped():
    text = "\n".join(["Supervisor: MARIA", "abc def", LINE_A, "lowercase name 1 2 3 4 5 6,00"])
    result = scan_report(text)
    assert [r.rca for r in result.records] == ["123"]
    assert result.stats.unmatched == 3
    assert result.stats.matched["A"] == 1


def test_header_lines_do_not_stop_parsing():
    text = "\n".join([
        "315 - Vendas por RCA",
        "Período: 01/10/2026 a 17/10/2026",
        "Código Rca Nome",
        LINE_A,
        "Página 1 de 2",
        LINE_B.replace(" 123 ", " 456 "),
    ])
    result = scan_report(text)
    assert [r.rca for r in result.records] == ["123", "456"]
    assert result.stats.skipped == 4


def test_report_code_prefix_is_skipped_even_for_data_lines():
    assert extract_records("315 ACME CORP 1 2 3 10,50 4 5 100,00 200,50") == []


def test_stop_line_ends_table():
    text = "\n".join([
        LINE_A,
        "Total do Supervisor 1 2 3",
        "456 OUTRO RCA 1 2 3 10,50 4 5 100,00 300,00",
    ])
    result = scan_report(text)
    assert [r.rca for r in result.records] == ["123"]
    assert result.stats.stopped_at == "Total do Supervisor 1 2 3"


def test_statistics_line_ends_table():
    text = "\n".join(["Estatística", LINE_A, LINE_B])
    assert extract_records(text) == []


def test_duplicates_are_kept_before_dedup():
    text = "\n".join([LINE_A, LINE_A.replace("200,50", "300,00")])
    records = extract_records(text)
    assert [r.sales for r in records] == [200.5, 300.0]


def test_oversized_counter_falls_back_to_zero():
    """Test: Ein kaputter Zähler verwirft nicht die ganze Zeile"""
    line = "123 ACME CORP 1 " + "9" * 5000 + " 3 10,50 4 5 100,00 200,50"

    [record] = extract_records(line)

    assert record.rca == "123"
    assert record.mix == 5
    assert record.sales == 200.5
    if hasattr(sys, "get_int_max_str_digits"):
        assert record.cliPosit == 0
