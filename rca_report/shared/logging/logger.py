"""
Base Logger Factory - Generische Logger-Erstellung
Wird von Modul-spezifischen Loggern verwendet (pdf_reader, etc.)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from rca_report.config.settings import LOG_DIR, resolve_path


def create_module_logger(
    module_name: str,
    log_subdir: str,
    console_level: int = logging.ERROR,
    file_level: int = logging.INFO,
    file_name: Optional[str] = None,
    max_bytes: int = 512_000,
    backups: int = 3
) -> logging.Logger:
    """
    Generische Logger Factory für Module

    Args:
        module_name: Name des Loggers (z.B. 'APP', 'RCA_REPORT')
        log_subdir: Unterverzeichnis in logs/ (z.B. 'app', 'rca_report')
        console_level: Log Level für Console (default: ERROR)
        file_level: Log Level für File (default: INFO)
        file_name: Optional - Name der Log-Datei (default: {log_subdir}.log)
        max_bytes: Maximale Größe bis zur Rotation
        backups: Anzahl aufbewahrter rotierter Dateien

    Returns:
        Konfigurierter Logger mit Console + File Handler
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(logging.DEBUG)  # Niedrigster Level, Handler filtern dann

    # Verhindere doppelte Handler
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%d.%m.%Y %H:%M:%S'
    )

    # 1. Console Handler (stderr, default nur ERROR+)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. Rotating File Handler (logs/{log_subdir}/{file_name}), mode="a" behält alte Logs
    log_dir = resolve_path(LOG_DIR) / log_subdir
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = file_name or f"{log_subdir}.log"
    file_handler = RotatingFileHandler(log_dir / log_file, mode="a", maxBytes=max_bytes,
                                       backupCount=backups, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


# ✅ Zentrale App Logger Instanz
# Diese wird von allen Modulen importiert, um Redundanz zu vermeiden
app_logger = create_module_logger('APP', 'app',
                                  console_level=logging.ERROR,
                                  file_level=logging.ERROR)
