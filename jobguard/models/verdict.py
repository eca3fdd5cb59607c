from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


VerdictStatus = Literal["Scam", "Suspicious", "Legitimate"]


class Verdict(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: VerdictStatus
    risk_score: int = Field(strict=True, ge=0, le=100, description="100 means the posting is almost certainly a scam.")
    primary_reason: str = Field(..., min_length=1, description="One-sentence summary of the assessment.")
    red_flags: list[str] = Field(description="Specific fraud indicators found in the posting.")
    recommendations: list[str] = Field(description="Advice for the candidate.")

    @field_validator("primary_reason")
    @classmethod
    def _reason_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("primary_reason must not be blank")
        return value

    @computed_field
    @property
    def trust_score(self) -> int:
        return 100 - self.risk_score


class HistoryEntry(BaseModel):
    id: int
    title: str = Field(description="Preview of the submitted text.")
    status: VerdictStatus
    timestamp: str = Field(description="Local creation time, h:mm:ss AM/PM.")
