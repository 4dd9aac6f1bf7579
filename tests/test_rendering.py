"""Tests for the template rendering engine and the shared resume view."""

import re

import pytest

from resume_studio.errors import UnknownTemplateError
from resume_studio.models.resume import ResumeDocument, TemplateId
from resume_studio.rendering import (
    LAYOUTS,
    NEUTRAL_FIT,
    FitParameters,
    build_view,
    get_layout,
    render,
)
from resume_studio.rendering.view import split_lines

from conftest import ALL_TEMPLATES, SIDEBAR_TEMPLATES


def _with_template(document, template_id):
    return document.model_copy(update={"template_id": template_id})


def _body(html: str) -> str:
    return html.split("<body>", 1)[1]


class TestResumeView:
    def test_sections_present(self, full_document):
        view = build_view(full_document, "en")
        assert list(view.sections) == [
            "summary",
            "experience",
            "projects",
            "education",
            "certifications",
            "skills",
            "custom",
        ]

    def test_empty_sections_omitted(self, no_projects_document):
        view = build_view(no_projects_document, "en")
        assert view.section("projects") is None
        assert "projects" not in view.sections

    def test_present_replaces_end_date(self, full_document):
        entry = build_view(full_document, "en").section("experience").entries[0]
        assert entry.end == "Present"
        assert entry.date_range == "2020-02 – Present"

    def test_present_is_localized(self, full_document):
        entry = build_view(full_document, "es").section("experience").entries[0]
        assert entry.end == "Actualidad"

    def test_description_lines_drop_blanks(self, full_document):
        entry = build_view(full_document, "en").section("experience").entries[0]
        assert entry.lines == ("Led the platform team.", "Designed the event pipeline.")

    def test_custom_heading_uses_title(self, full_document):
        assert build_view(full_document, "en").section("custom").heading == "Languages"
        untitled = full_document.model_copy(update={"custom_section_title": "  "})
        assert build_view(untitled, "fr").section("custom").heading == (
            "Informations complémentaires"
        )

    def test_blank_entries_dropped(self):
        doc = ResumeDocument.model_validate({"skills": [{"name": "  "}]})
        assert build_view(doc, "en").section("skills") is None

    def test_screen_fallbacks(self):
        view = build_view(ResumeDocument(), "fr")
        assert view.name == ""
        assert view.screen_name == "Votre nom"


def test_split_lines():
    assert split_lines("a\n\n  b  \r\nc") == ("a", "b", "c")
    assert split_lines("") == ()


class TestRender:
    @pytest.mark.parametrize("template_id", ALL_TEMPLATES)
    def test_every_template_renders_every_section(self, full_document, template_id):
        layout = render(_with_template(full_document, template_id), "en")
        assert layout.template_id is template_id
        assert f"template-{template_id.value}" in layout.html
        assert 'id="resume-preview"' in layout.html
        for key in ("summary", "experience", "projects", "education", "certifications", "skills", "custom"):
            assert f"section-{key}" in layout.html
        assert "Jane Doe" in layout.html
        assert "Languages" in layout.html

    @pytest.mark.parametrize("template_id", ALL_TEMPLATES)
    def test_empty_projects_omitted(self, no_projects_document, template_id):
        html = render(_with_template(no_projects_document, template_id), "en").html
        assert "section-projects" not in html
        assert "Projects" not in _body(html)

    @pytest.mark.parametrize("template_id", ALL_TEMPLATES)
    def test_present_token(self, full_document, template_id):
        html = render(_with_template(full_document, template_id), "en").html
        assert "Present" in html
        assert "2099-01" not in html

    @pytest.mark.parametrize("template_id", SIDEBAR_TEMPLATES)
    def test_sidebar_regions(self, full_document, template_id):
        layout = render(_with_template(full_document, template_id), "en")
        assert layout.has_sidebar
        aside = re.search(r"<aside>(.*?)</aside>", layout.html, re.DOTALL).group(1)
        main = re.search(r"<main>(.*?)</main>", layout.html, re.DOTALL).group(1)
        for key in ("contact", "education", "skills", "certifications"):
            assert f"section-{key}" in aside
        for key in ("summary", "experience", "projects", "custom"):
            assert f"section-{key}" in main

    def test_user_text_is_escaped(self, escaping_document):
        html = render(escaping_document, "en").html
        assert "100% A&amp;B_C" in html
        assert "R&amp;D #1" in html

    def test_fit_parameters_in_stylesheet(self, full_document):
        html = render(full_document, "en", FitParameters(scale=0.8, spacing=1.5)).html
        assert "--fit-scale: 0.8;" in html
        assert "--fit-spacing: 1.5;" in html
        assert "font-size: 8.000pt" in html
        assert "margin-bottom: 27.00px" in html

    def test_neutral_fit_by_default(self, full_document):
        assert render(full_document).fit == NEUTRAL_FIT

    def test_localized_headings(self, full_document):
        html = render(full_document, "fr").html
        assert "Expérience professionnelle" in html
        assert 'lang="fr"' in html

    def test_rendering_is_deterministic(self, full_document):
        assert render(full_document, "en").html == render(full_document, "en").html

    def test_plain_string_template_id(self, full_document):
        # model_copy skips validation, so the field holds a bare string
        document = full_document.model_copy(update={"template_id": "professional"})
        layout = render(document)
        assert layout.template_id is TemplateId.PROFESSIONAL
        assert layout.has_sidebar
        assert build_view(document, "en").template_id is TemplateId.PROFESSIONAL


class TestLayouts:
    def test_six_templates(self):
        assert set(LAYOUTS) == set(TemplateId)

    def test_only_two_sidebar_layouts(self):
        assert {t for t, layout in LAYOUTS.items() if layout.has_sidebar} == set(SIDEBAR_TEMPLATES)

    def test_serif_families(self):
        assert get_layout("classic").typeface == "serif"
        assert get_layout("executive").typeface == "serif"
        assert get_layout("modern").typeface == "sans"

    def test_unknown_template(self):
        with pytest.raises(UnknownTemplateError):
            get_layout("glossy")
