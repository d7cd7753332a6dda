"""Modul zum Klassifizieren der Textzeilen des 315-Reports und Extrahieren der RCA-Zeilen."""
import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..logger import parser_logger
from ..patterns import LAYOUTS, SKIP_MARKERS, STOP_MARKERS, LineLayout
from ..schemas import RcaRecord
from .number_service import normalize, parse_int

logger = parser_logger

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE_RE = re.compile(r"\s+")


class LineKind(str, Enum):
    SKIP = "skip"
    STOP = "stop"
    CANDIDATE = "candidate"


@dataclass
class ExtractionStats:
    """Counters of one extraction pass, for logging and diagnostics."""
    lines: int = 0
    skipped: int = 0
    unmatched: int = 0
    discarded: int = 0
    stopped_at: Optional[str] = None
    matched: Counter = field(default_factory=Counter)


@dataclass
class ExtractionResult:
    records: List[RcaRecord]
    stats: ExtractionStats


def split_lines(text: Optional[str]) -> List[str]:
    """Split on any newline convention, collapse inner whitespace, drop empty lines."""
    lines = []
    for raw in _NEWLINE_RE.split(str(text or "")):
        line = _WHITESPACE_RE.sub(" ", raw).strip()
        if line:
            lines.append(line)
    return lines


def classify_line(line: str) -> LineKind:
    if any(marker.match(line) for marker in SKIP_MARKERS):
        return LineKind.SKIP
    if any(marker.match(line) for marker in STOP_MARKERS):
        return LineKind.STOP
    return LineKind.CANDIDATE


def match_layout(line: str) -> Optional[Tuple[LineLayout, re.Match]]:
    """Try each layout in order; the first one that matches wins."""
    for layout in LAYOUTS:
        match = layout.regex.match(line)
        if match:
            return layout, match
    return None


def _int_field(raw: str) -> int:
    return parse_int(raw).or_default(0)


def _rca_field(raw: str) -> str:
    # "000" and unparsable codes both end up as ""
    value = _int_field(raw)
    return str(value) if value else ""


def record_from_match(layout: LineLayout, match: re.Match) -> Optional[RcaRecord]:
    """Build the record for a matched line, or None if the layout rejects it."""
    groups = match.groups()
    slots = layout.field_map

    rca = _rca_field(groups[slots["rca"]])
    if layout.require_rca and not rca:
        return None

    return RcaRecord(
        rca=rca,
        name=groups[slots["name"]].strip(),
        cliPosit=_int_field(groups[slots["cliPosit"]]),
        mix=_int_field(groups[slots["mix"]]),
        sales=normalize(groups[slots["sales"]]),
    )


def scan_report(text: Optional[str]) -> ExtractionResult:
    """
    Liest alle Zeilen des Reports und extrahiert die RCA-Zeilen.

    Kopf- und Fußzeilen werden übersprungen, bei "Total do Supervisor" bzw.
    "Estatística" endet die Tabelle. Zeilen ohne passendes Layout werden
    verworfen.

    Args:
        text: Gesamter Text der PDF (alle Seiten).

    Returns:
        ExtractionResult: Datensätze in Reihenfolge des Auftretens (mit Duplikaten) und Zähler.
    """
    stats = ExtractionStats()
    records: List[RcaRecord] = []

    for line in split_lines(text):
        stats.lines += 1
        kind = classify_line(line)
        if kind is LineKind.SKIP:
            stats.skipped += 1
            continue
        if kind is LineKind.STOP:
            stats.stopped_at = line
            logger.debug(f"Tabellenende erkannt: {line!r}")
            break

        found = match_layout(line)
        if not found:
            stats.unmatched += 1
            logger.debug(f"Zeile ohne Layout verworfen: {line!r}")
            continue

        layout, match = found
        record = record_from_match(layout, match)
        if record is None:
            stats.discarded += 1
            logger.debug(f"Layout {layout.name} ohne RCA verworfen: {line!r}")
            continue

        stats.matched[layout.name] += 1
        records.append(record)

    return ExtractionResult(records=records, stats=stats)


def extract_records(text: Optional[str]) -> List[RcaRecord]:
    return scan_report(text).records
