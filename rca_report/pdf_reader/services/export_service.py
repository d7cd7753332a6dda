"""Modul zum Export der RCA-Zeilen als JSON (und optional Excel)."""
import json
import os
from contextlib import ExitStack, contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional

import pandas as pd

from ..logger import report_logger
from ..schemas import RcaRecord, ReportPayload

logger = report_logger

EXCEL_COLUMNS = ["rca", "name", "cliPosit", "mix", "sales"]


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp like 2026-10-17T12:00:00.000Z."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(rows: List[RcaRecord], pdf_hash: str,
                  generated_at: Optional[datetime] = None) -> ReportPayload:
    return ReportPayload(generatedAt=iso_timestamp(generated_at), pdfHash=pdf_hash, rows=rows)


def staging_path(target: Path) -> Path:
    # Suffix bleibt erhalten, pandas prüft die Endung der Excel-Datei
    return target.with_name(f".{target.stem}.tmp{target.suffix}")


@contextmanager
def atomic_write(target: Path) -> Iterator[Path]:
    """
    Liefert eine temporäre Datei neben `target`, die erst am Ende per
    os.replace an ihren Platz kommt.

    Bei einer Exception bleibt `target` unverändert und die temporäre Datei
    wird entfernt.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = staging_path(target)
    try:
        yield tmp
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()


def _dump_json(payload: ReportPayload, path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload.model_dump(), f, ensure_ascii=False, indent=2)


def _dump_excel(rows: List[RcaRecord], path: Path) -> pd.DataFrame:
    df = pd.DataFrame([row.model_dump() for row in rows], columns=EXCEL_COLUMNS)
    with pd.ExcelWriter(path, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name="RCAs")
        workbook = writer.book
        worksheet = writer.sheets["RCAs"]
        decimal_format = workbook.add_format({"num_format": "#,##0.00"})
        worksheet.set_column("E:E", None, decimal_format)
    return df


def write_json(payload: ReportPayload, output_json: Path) -> Path:
    """Overwrite `output_json` with the payload, creating parent folders."""
    with atomic_write(output_json) as tmp:
        _dump_json(payload, tmp)

    logger.info(f"JSON gespeichert: {output_json} ({len(payload.rows)} RCAs)")
    return output_json


def write_excel(rows: List[RcaRecord], output_excel: Path) -> pd.DataFrame:
    """
    Speichert die RCA-Zeilen als Excel-Datei.

    Args:
        rows: Deduplizierte Datensätze.
        output_excel: Pfad zur Ausgabedatei.

    Returns:
        pd.DataFrame: Exportierte Daten.
    """
    with atomic_write(output_excel) as tmp:
        df = _dump_excel(rows, tmp)

    logger.info(f"DataFrame als Excel-Datei gespeichert: {output_excel}")
    return df


def write_outputs(payload: ReportPayload, output_json: Path,
                  output_excel: Optional[Path] = None) -> None:
    """Write the JSON (and Excel) artifact; either all files land or none."""
    with ExitStack() as stack:
        json_tmp = stack.enter_context(atomic_write(output_json))
        excel_tmp = stack.enter_context(atomic_write(output_excel)) if output_excel else None

        _dump_json(payload, json_tmp)
        if excel_tmp is not None:
            _dump_excel(payload.rows, excel_tmp)

    logger.info(f"JSON gespeichert: {output_json} ({len(payload.rows)} RCAs)")
    if output_excel:
        logger.info(f"DataFrame als Excel-Datei gespeichert: {output_excel}")
