"""Pydantic models for ATS analysis output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AtsBreakdown(BaseModel):
    sections: float = 0  # /20
    keywords: float = 0  # /30
    formatting: float = 0  # /15
    skills: float = 0  # /15
    clarity: float = 0  # /20


class AtsDetails(BaseModel):
    word_count: int
    found_sections: list[str]
    missing_sections: list[str]
    contact_info_found: bool
    file_type: str


class AtsResult(BaseModel):
    score: int = Field(ge=0, le=100)
    breakdown: AtsBreakdown
    strengths: list[str]
    improvements: list[str]
    details: AtsDetails


def score_band(score: int) -> str:
    """Colour band used when presenting a score: good, fair or poor."""
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"
