"""
Configuration - Re-Export Layer

Stellt die zentrale Konfiguration aus config/settings.py bereit.
Alle Werte können über die .env Datei überschrieben werden.
"""

from .settings import (
    INPUT_PDF,
    OUTPUT_JSON,
    LOG_DIR,
    resolve_path,
)

__all__ = [
    "INPUT_PDF",
    "OUTPUT_JSON",
    "LOG_DIR",
    "resolve_path",
]
