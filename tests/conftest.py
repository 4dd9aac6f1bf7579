"""Shared test fixtures."""

from __future__ import annotations

import pytest

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
)

ALL_TEMPLATES = list(TemplateId)
SIDEBAR_TEMPLATES = [TemplateId.PROFESSIONAL, TemplateId.MINIMAL]
FLOWED_TEMPLATES = [t for t in TemplateId if t not in SIDEBAR_TEMPLATES]


@pytest.fixture
def personal_info() -> PersonalInfo:
    return PersonalInfo(
        full_name="Jane Doe",
        title="Backend Engineer",
        email="jane@example.com",
        phone="+1 555 123 4567",
        location="Lisbon",
        website="https://janedoe.dev",
        summary="Engineer focused on reliable data systems.\nEnjoys mentoring.",
    )


@pytest.fixture
def full_document(personal_info) -> ResumeDocument:
    return ResumeDocument(
        personal_info=personal_info,
        experience=(
            Experience(
                id="exp-old",
                company="Initech",
                position="Junior Developer",
                start_date="2015-01",
                end_date="2018-06",
                description="Maintained billing scripts.",
            ),
            Experience(
                id="exp-current",
                company="Globex",
                position="Staff Engineer",
                start_date="2020-02",
                end_date="2099-01",
                current=True,
                description="Led the platform team.\n\nDesigned the event pipeline.",
            ),
            Experience(
                id="exp-mid",
                company="Umbrella",
                position="Engineer",
                start_date="2018-07",
                end_date="2020-01",
                description="",
            ),
        ),
        projects=(
            Project(
                id="proj-1",
                name="ledger-cli",
                link="https://github.com/jane/ledger-cli",
                description="Command line bookkeeping.",
            ),
        ),
        education=(
            Education(
                id="edu-1",
                school="University of Porto",
                degree="BSc Informatics",
                start_date="2011",
                end_date="2014",
            ),
        ),
        certifications=(
            Certification(id="cert-old", name="CKA", issuer="CNCF", date="2019-03"),
            Certification(id="cert-new", name="AWS SA Pro", issuer="Amazon", date="2023-09"),
        ),
        skills=(Skill(id="sk-1", name="Python"), Skill(id="sk-2", name="PostgreSQL", level=5)),
        custom_items=(
            CustomItem(id="lang-1", name="Portuguese", city="Native"),
        ),
        custom_section_title="Languages",
    )


@pytest.fixture
def no_projects_document(full_document) -> ResumeDocument:
    return full_document.model_copy(update={"projects": ()})


@pytest.fixture
def escaping_document() -> ResumeDocument:
    return ResumeDocument(
        personal_info=PersonalInfo(full_name="Jane Doe", summary="100% A&B_C"),
        experience=(
            Experience(company="R&D #1", position="Dev_Ops", description="Cut cost by 100% A&B_C"),
        ),
    )
