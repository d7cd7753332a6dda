"""
Shared Module - Zentrale Infrastruktur für alle Module

Verwendung in Modulen:
    from rca_report.shared import create_module_logger, app_logger
"""

from .logging import create_module_logger, app_logger

__all__ = [
    "create_module_logger",
    "app_logger",
]
