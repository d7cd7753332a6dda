"""PDF Reader module: turns the Winthor 315 "vendas por RCA" report into JSON.

This package provides pure services (no UI) to:
- extract the text of the report PDF and tag it with a content hash
- classify the text lines and extract one record per RCA row
- export the deduplicated rows as a JSON artifact (optionally Excel)

The CLI in cli.py wires the services together.
"""

from .schemas import RcaRecord, ReportPayload
from .services.report_parser import parse_report

__all__ = ["RcaRecord", "ReportPayload", "parse_report"]
