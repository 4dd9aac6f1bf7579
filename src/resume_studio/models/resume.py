"""Pydantic models for the resume document."""

from __future__ import annotations

import uuid
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


class TemplateId(str, Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    EXECUTIVE = "executive"


class _Model(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class PersonalInfo(_Model):
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""


class Experience(_Model):
    id: str = Field(default_factory=new_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class Project(_Model):
    id: str = Field(default_factory=new_id)
    name: str = ""
    link: str = ""
    description: str = ""


class Education(_Model):
    id: str = Field(default_factory=new_id)
    school: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False


class Certification(_Model):
    id: str = Field(default_factory=new_id)
    name: str = ""
    issuer: str = ""
    date: str = ""


class Skill(_Model):
    id: str = Field(default_factory=new_id)
    name: str = ""
    level: int = Field(default=3, ge=1, le=5)


class CustomItem(_Model):
    id: str = Field(default_factory=new_id)
    name: str = ""
    city: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class ResumeDocument(_Model):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: tuple[Experience, ...] = ()
    projects: tuple[Project, ...] = ()
    education: tuple[Education, ...] = ()
    certifications: tuple[Certification, ...] = ()
    skills: tuple[Skill, ...] = ()
    custom_items: tuple[CustomItem, ...] = ()
    custom_section_title: str = ""
    template_id: TemplateId = TemplateId.MODERN

    def fingerprint(self) -> str:
        """Stable content key; changes whenever content or template changes."""
        return self.model_dump_json(by_alias=True)


def load_document(path: str | Path) -> ResumeDocument:
    """Read a resume document from its camelCase JSON form."""
    return ResumeDocument.model_validate_json(Path(path).read_text(encoding="utf-8"))


def dump_document(document: ResumeDocument) -> str:
    return document.model_dump_json(by_alias=True, indent=2)
