"""Data models for resume documents and ATS results."""

from resume_studio.models.ats import AtsBreakdown, AtsDetails, AtsResult, score_band
from resume_studio.models.resume import (
    Certification,
    CustomItem,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeDocument,
    Skill,
    TemplateId,
    dump_document,
    load_document,
)
from resume_studio.models.store import ResumeStore

__all__ = [
    "AtsBreakdown",
    "AtsDetails",
    "AtsResult",
    "Certification",
    "CustomItem",
    "Education",
    "Experience",
    "PersonalInfo",
    "Project",
    "ResumeDocument",
    "ResumeStore",
    "Skill",
    "TemplateId",
    "dump_document",
    "load_document",
    "score_band",
]
