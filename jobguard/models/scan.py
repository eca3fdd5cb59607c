from typing import Optional

from pydantic import BaseModel, Field

from .verdict import HistoryEntry, Verdict


class ScanRequest(BaseModel):
    job_text: str = Field(
        ...,
        description="Pasted job posting: description, company name, or contact details.",
    )


class HistoryResponse(BaseModel):
    count: int
    entries: list[HistoryEntry] = Field(default_factory=list)


class ScanResponse(BaseModel):
    verdict: Verdict
    history: HistoryResponse


class SessionStateResponse(BaseModel):
    job_text: str
    in_progress: bool
    can_submit: bool
    result: Optional[Verdict] = None
    error: Optional[str] = None


class SecurityTip(BaseModel):
    position: int
    text: str


class CrossCheckResource(BaseModel):
    name: str
    url: str
    description: str


class GuidanceResponse(BaseModel):
    tips: list[SecurityTip]
    cross_checks: list[CrossCheckResource]
