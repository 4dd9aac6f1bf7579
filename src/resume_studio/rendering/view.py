"""Format-independent view of a resume, shared by every output format.

All decisions about *what* appears live here: which sections are non-empty,
how date ranges read (including the localized "Present" token), and how
free-text descriptions split into lines. The HTML renderer and both export
compilers only decide *how* to emit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_studio.locales import Locale, resolve_locale
from resume_studio.models.resume import ResumeDocument, TemplateId
from resume_studio.normalizer import normalize
from resume_studio.rendering.layouts import get_layout

SECTION_KEYS = (
    "summary",
    "experience",
    "projects",
    "education",
    "certifications",
    "skills",
    "custom",
)


def split_lines(text: str) -> tuple[str, ...]:
    """Split free text on line breaks, dropping blank lines."""
    return tuple(line.strip() for line in (text or "").splitlines() if line.strip())


@dataclass(frozen=True)
class Entry:
    title: str = ""
    subtitle: str = ""
    start: str = ""
    end: str = ""
    link: str = ""
    lines: tuple[str, ...] = ()

    @property
    def date_range(self) -> str:
        if self.start and self.end:
            return f"{self.start} – {self.end}"
        return self.start or self.end

    @property
    def is_blank(self) -> bool:
        return not (self.title or self.subtitle or self.start or self.end or self.link or self.lines)


@dataclass(frozen=True)
class Section:
    key: str
    heading: str
    entries: tuple[Entry, ...] = ()
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContactItem:
    kind: str  # email, phone, location, website
    value: str


@dataclass(frozen=True)
class ResumeView:
    template_id: TemplateId
    locale: Locale
    name: str
    title: str
    contact: tuple[ContactItem, ...]
    sections: dict[str, Section] = field(default_factory=dict)

    @property
    def screen_name(self) -> str:
        return self.name or self.locale.labels.full_name

    @property
    def screen_title(self) -> str:
        return self.title or self.locale.labels.job_title

    @property
    def present(self) -> str:
        return self.locale.labels.present

    @property
    def contact_heading(self) -> str:
        return self.locale.headings.contact

    def section(self, key: str) -> Section | None:
        return self.sections.get(key)

    def ordered(self, keys: tuple[str, ...] | list[str]) -> list[Section]:
        """Non-empty sections among ``keys``, in the order given."""
        return [self.sections[k] for k in keys if k in self.sections]


def _end(entry, present: str) -> str:
    return present if entry.current else entry.end_date.strip()


def _non_blank(entries) -> tuple[Entry, ...]:
    return tuple(e for e in entries if not e.is_blank)


def build_view(document: ResumeDocument, locale: Locale | str) -> ResumeView:
    """Normalize ``document`` and resolve everything each format needs."""
    loc = resolve_locale(locale)
    doc = normalize(document)
    info = doc.personal_info
    headings = loc.headings
    present = loc.labels.present

    sections: dict[str, Section] = {}

    summary = split_lines(info.summary)
    if summary:
        sections["summary"] = Section("summary", headings.summary, lines=summary)

    experience = _non_blank(
        Entry(
            title=exp.position.strip(),
            subtitle=exp.company.strip(),
            start=exp.start_date.strip(),
            end=_end(exp, present),
            lines=split_lines(exp.description),
        )
        for exp in doc.experience
    )
    if experience:
        sections["experience"] = Section("experience", headings.experience, experience)

    projects = _non_blank(
        Entry(
            title=proj.name.strip(),
            link=proj.link.strip(),
            lines=split_lines(proj.description),
        )
        for proj in doc.projects
    )
    if projects:
        sections["projects"] = Section("projects", headings.projects, projects)

    education = _non_blank(
        Entry(
            title=edu.school.strip(),
            subtitle=edu.degree.strip(),
            start=edu.start_date.strip(),
            end=_end(edu, present),
        )
        for edu in doc.education
    )
    if education:
        sections["education"] = Section("education", headings.education, education)

    certifications = _non_blank(
        Entry(title=cert.name.strip(), subtitle=cert.issuer.strip(), end=cert.date.strip())
        for cert in doc.certifications
    )
    if certifications:
        sections["certifications"] = Section(
            "certifications", headings.certifications, certifications
        )

    skills = _non_blank(Entry(title=skill.name.strip()) for skill in doc.skills)
    if skills:
        sections["skills"] = Section("skills", headings.skills, skills)

    custom = _non_blank(
        Entry(
            title=item.name.strip(),
            subtitle=item.city.strip(),
            start=item.start_date.strip(),
            end=_end(item, present),
            lines=split_lines(item.description),
        )
        for item in doc.custom_items
    )
    if custom:
        heading = doc.custom_section_title.strip() or headings.custom
        sections["custom"] = Section("custom", heading, custom)

    contact = tuple(
        ContactItem(kind, value.strip())
        for kind, value in (
            ("email", info.email),
            ("phone", info.phone),
            ("location", info.location),
            ("website", info.website),
        )
        if value.strip()
    )

    return ResumeView(
        template_id=get_layout(doc.template_id).template_id,
        locale=loc,
        name=info.full_name.strip(),
        title=info.title.strip(),
        contact=contact,
        sections=sections,
    )
