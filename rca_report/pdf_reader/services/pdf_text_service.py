"""Modul zum Auslesen des Textes aus der Report-PDF."""
import hashlib
from pathlib import Path

import pdfplumber

from ..logger import report_logger

logger = report_logger

HASH_LENGTH = 16
_CHUNK_SIZE = 64 * 1024


def extract_text_from_pdf(pdf_path: Path) -> str:
    """Return the text of all pages, each page preceded by a newline.

    pdfplumber keeps the line breaks of the page layout, which is what the
    line parser needs.
    """
    with pdfplumber.open(pdf_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]

    logger.info(f"{len(pages)} Seite(n) gelesen: {pdf_path}")
    return "".join("\n" + page_text for page_text in pages)


def sha256_file(file_path: Path) -> str:
    """First 16 hex chars of the SHA-256 of the raw file bytes."""
    digest = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()[:HASH_LENGTH]
