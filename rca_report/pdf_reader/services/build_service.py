"""Kompletter Lauf: PDF lesen, Report parsen, JSON schreiben."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import EmptyExtractionError, ExtractionFailedError, MissingInputError
from ..logger import report_logger
from .export_service import build_payload, write_outputs
from .pdf_text_service import extract_text_from_pdf, sha256_file
from .report_parser import parse_report

logger = report_logger


@dataclass
class BuildResult:
    output_path: Path
    row_count: int
    pdf_hash: str


def build_report(input_pdf: Path, output_json: Path,
                 excel_output: Optional[Path] = None) -> BuildResult:
    """
    Erstellt das JSON-Artefakt aus der Report-PDF.

    Es wird nichts geschrieben, wenn die PDF fehlt, die Extraktion scheitert
    oder keine Zeile erkannt wurde.

    Args:
        input_pdf: Pfad zur PDF-Datei.
        output_json: Zieldatei (wird überschrieben).
        excel_output: Optional - zusätzliche Excel-Datei.

    Returns:
        BuildResult: Zieldatei, Anzahl RCAs und Hash der PDF.

    Raises:
        MissingInputError, ExtractionFailedError, EmptyExtractionError
    """
    logger.info(f"🧪 build_report START: input={input_pdf}")

    if not input_pdf.is_file():
        raise MissingInputError(input_pdf)

    try:
        text = extract_text_from_pdf(input_pdf)
    except Exception as e:
        raise ExtractionFailedError(input_pdf, str(e)) from e

    rows = parse_report(text)
    if not rows:
        raise EmptyExtractionError(input_pdf)

    pdf_hash = sha256_file(input_pdf)
    payload = build_payload(rows, pdf_hash)
    write_outputs(payload, output_json, output_excel=excel_output)

    return BuildResult(output_path=output_json, row_count=len(rows), pdf_hash=pdf_hash)
