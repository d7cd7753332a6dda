"""rca_report - Winthor 315 sales-by-RCA PDF report to JSON."""

__version__ = "1.0.0"
