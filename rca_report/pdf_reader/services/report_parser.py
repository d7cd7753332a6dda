"""Parser für den kompletten Text eines 315-Reports."""
from typing import List, Optional

from ..logger import report_logger
from ..schemas import RcaRecord
from .dedup_service import dedupe
from .line_extractor import scan_report

logger = report_logger


def parse_report(full_text: Optional[str]) -> List[RcaRecord]:
    """
    Extrahiert die RCA-Zeilen und entfernt Duplikate (letzte Zeile gewinnt).

    Eine leere Liste wird zurückgegeben, wenn keine Zeile erkannt wurde;
    der Aufrufer entscheidet, ob das ein Fehler ist.
    """
    result = scan_report(full_text)
    rows = dedupe(result.records)

    stats = result.stats
    logger.info(
        f"Zeilen: {stats.lines}, übersprungen: {stats.skipped}, "
        f"Layout A: {stats.matched['A']}, Layout B: {stats.matched['B']}, "
        f"ohne Layout: {stats.unmatched}, RCAs: {len(rows)}"
    )
    return rows
