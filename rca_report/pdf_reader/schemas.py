"""Report Schemas - Output Validation"""

from pydantic import BaseModel, Field


class RcaRecord(BaseModel):
    """One salesperson (RCA) row of the 315 report."""
    rca: str
    name: str
    cliPosit: int = Field(..., ge=0)
    mix: int = Field(..., ge=0)
    sales: float = Field(..., ge=0)


class ReportPayload(BaseModel):
    """Output Schema: JSON artifact written per run"""
    generatedAt: str
    pdfHash: str = Field(..., min_length=16, max_length=16)
    rows: list[RcaRecord]
