"""Failures that end a report build.

Field- and line-level problems never show up here; they degrade to defaults
inside the parser.
"""
from pathlib import Path


class ReportBuildError(Exception):
    """Base class for run-terminating report build failures."""


class MissingInputError(ReportBuildError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"PDF not found: {path}")


class EmptyExtractionError(ReportBuildError):
    """No line of the report matched a known 315 layout."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No line recognized in the 315 layout, check the PDF: {path}")


class ExtractionFailedError(ReportBuildError):
    """The PDF text extractor raised; the original error is chained as __cause__."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Text extraction failed for {path}: {reason}")
