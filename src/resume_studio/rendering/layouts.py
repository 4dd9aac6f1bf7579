"""Fixed layout rules for the six templates.

Each template is one ``TemplateLayout`` value in ``LAYOUTS``. Variants are
siblings: they differ in region structure, section order and typeface, and
all of them include every non-empty section.
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_studio.errors import UnknownTemplateError
from resume_studio.models.resume import TemplateId

SIDEBAR_SECTIONS = ("contact", "education", "skills", "certifications")
SIDEBAR_MAIN_SECTIONS = ("summary", "experience", "projects", "custom")


@dataclass(frozen=True)
class TemplateLayout:
    template_id: TemplateId
    display_name: str
    typeface: str  # "serif" or "sans"
    main: tuple[str, ...]
    sidebar: tuple[str, ...] = ()

    @property
    def has_sidebar(self) -> bool:
        return bool(self.sidebar)

    @property
    def html_template(self) -> str:
        return f"{self.template_id.value}.html.j2"


LAYOUTS: dict[TemplateId, TemplateLayout] = {
    TemplateId.MODERN: TemplateLayout(
        TemplateId.MODERN,
        "Modern",
        "sans",
        main=("summary", "experience", "projects", "education", "certifications", "skills", "custom"),
    ),
    TemplateId.CLASSIC: TemplateLayout(
        TemplateId.CLASSIC,
        "Classic",
        "serif",
        main=("summary", "experience", "education", "projects", "certifications", "skills", "custom"),
    ),
    TemplateId.MINIMAL: TemplateLayout(
        TemplateId.MINIMAL,
        "Minimal",
        "sans",
        main=SIDEBAR_MAIN_SECTIONS,
        sidebar=SIDEBAR_SECTIONS,
    ),
    TemplateId.PROFESSIONAL: TemplateLayout(
        TemplateId.PROFESSIONAL,
        "Professional",
        "sans",
        main=SIDEBAR_MAIN_SECTIONS,
        sidebar=SIDEBAR_SECTIONS,
    ),
    TemplateId.CREATIVE: TemplateLayout(
        TemplateId.CREATIVE,
        "Creative",
        "sans",
        main=("summary", "experience", "projects", "skills", "education", "certifications", "custom"),
    ),
    TemplateId.EXECUTIVE: TemplateLayout(
        TemplateId.EXECUTIVE,
        "Executive",
        "serif",
        main=("summary", "experience", "projects", "education", "skills", "certifications", "custom"),
    ),
}


def get_layout(template_id: TemplateId | str) -> TemplateLayout:
    """Look up a layout; unknown ids fail fast instead of falling back."""
    try:
        return LAYOUTS[TemplateId(template_id)]
    except (KeyError, ValueError):
        raise UnknownTemplateError(f"Unknown template: {template_id!r}") from None
