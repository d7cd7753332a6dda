"""Zentrale Konfigurationsverwaltung"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# --- Dateipfade (relativ zum Arbeitsverzeichnis) ---
INPUT_PDF = os.getenv('RCA_REPORT_INPUT_PDF', 'data/latest.pdf')
OUTPUT_JSON = os.getenv('RCA_REPORT_OUTPUT_JSON', 'public/data/latest.json')
LOG_DIR = os.getenv('RCA_REPORT_LOG_DIR', 'logs')


def resolve_path(value, base: Optional[Path] = None) -> Path:
    """Resolve a configured path against the working directory (or `base`)."""
    path = Path(value)
    if path.is_absolute():
        return path
    return (base or Path.cwd()) / path
