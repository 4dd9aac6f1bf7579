"""Tests for the Word document compiler."""

from io import BytesIO

import pytest
from docx import Document
from docx.oxml.ns import qn

from resume_studio.errors import UnknownTemplateError
from resume_studio.export.docx_compiler import (
    SIDEBAR_FILL,
    compile_document,
    compile_document_sync,
)
from resume_studio.models.resume import TemplateId

from conftest import ALL_TEMPLATES, FLOWED_TEMPLATES, SIDEBAR_TEMPLATES

HEADINGS = ["SUMMARY", "EXPERIENCE", "PROJECTS", "EDUCATION", "CERTIFICATIONS", "SKILLS", "LANGUAGES"]


def _open(document, template_id=None, locale="en"):
    if template_id is not None:
        document = document.model_copy(update={"template_id": template_id})
    return Document(BytesIO(compile_document_sync(document, locale)))


def _all_text(doc) -> str:
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                parts.append(cell.text)
    return "\n".join(parts)


class TestFlowedMode:
    @pytest.mark.parametrize("template_id", FLOWED_TEMPLATES)
    def test_section_order(self, full_document, template_id):
        doc = _open(full_document, template_id)
        assert not doc.tables
        headings = [p.text for p in doc.paragraphs if p.text in HEADINGS]
        assert headings == HEADINGS

    def test_title_and_contact_line(self, full_document):
        doc = _open(full_document)
        texts = [p.text for p in doc.paragraphs]
        assert texts[0] == "Jane Doe"
        assert texts[1] == "Backend Engineer"
        assert "jane@example.com | +1 555 123 4567" in texts[2]

    def test_names_are_bold(self, full_document):
        doc = _open(full_document)
        bold = {run.text for p in doc.paragraphs for run in p.runs if run.bold}
        assert {"Staff Engineer", "Globex", "University of Porto", "ledger-cli", "AWS SA Pro"} <= bold

    def test_description_bullets(self, full_document):
        doc = _open(full_document)
        bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]
        assert bullets[:2] == ["Led the platform team.", "Designed the event pipeline."]

    def test_heading_has_bottom_rule(self, full_document):
        doc = _open(full_document)
        heading = next(p for p in doc.paragraphs if p.text == "EXPERIENCE")
        assert heading._p.pPr.find(qn("w:pBdr")) is not None
        assert heading.runs[0].bold


class TestSidebarMode:
    @pytest.mark.parametrize("template_id", SIDEBAR_TEMPLATES)
    def test_two_cell_table(self, full_document, template_id):
        doc = _open(full_document, template_id)
        assert len(doc.tables) == 1
        left, right = doc.tables[0].rows[0].cells
        for heading in ("CONTACT", "SKILLS", "EDUCATION", "CERTIFICATIONS"):
            assert heading in left.text
        for heading in ("SUMMARY", "EXPERIENCE", "PROJECTS", "LANGUAGES"):
            assert heading in right.text
        assert "EXPERIENCE" not in left.text

    def test_left_cell_shaded(self, full_document):
        doc = _open(full_document, TemplateId.PROFESSIONAL)
        left = doc.tables[0].rows[0].cells[0]
        shd = left._tc.tcPr.find(qn("w:shd"))
        assert shd.get(qn("w:fill")) == SIDEBAR_FILL

    def test_name_above_table(self, full_document):
        doc = _open(full_document, TemplateId.MINIMAL)
        assert doc.paragraphs[0].text == "Jane Doe"


class TestCommonRules:
    @pytest.mark.parametrize("template_id", ALL_TEMPLATES)
    def test_empty_projects_omitted(self, no_projects_document, template_id):
        text = _all_text(_open(no_projects_document, template_id))
        assert "PROJECTS" not in text
        assert "EXPERIENCE" in text

    @pytest.mark.parametrize("template_id", ALL_TEMPLATES)
    def test_present_token(self, full_document, template_id):
        text = _all_text(_open(full_document, template_id))
        assert "2020-02 – Present" in text
        assert "2099-01" not in text

    def test_localized_headings(self, full_document):
        text = _all_text(_open(full_document, locale="es"))
        assert "EXPERIENCIA" in text
        assert "Actualidad" in text

    @pytest.mark.parametrize(
        "template_id,font",
        [
            (TemplateId.CLASSIC, "Georgia"),
            (TemplateId.EXECUTIVE, "Georgia"),
            (TemplateId.MODERN, "Calibri"),
            (TemplateId.PROFESSIONAL, "Calibri"),
        ],
    )
    def test_typeface_per_family(self, full_document, template_id, font):
        doc = _open(full_document, template_id)
        assert doc.styles["Normal"].font.name == font

    def test_a4_page(self, full_document):
        section = _open(full_document).sections[0]
        assert section.page_width.mm == pytest.approx(210, abs=0.5)
        assert section.page_height.mm == pytest.approx(297, abs=0.5)

    def test_user_text_verbatim(self, escaping_document):
        text = _all_text(_open(escaping_document))
        assert "100% A&B_C" in text
        assert "R&D #1" in text

    def test_unknown_template_fails_fast(self, full_document):
        broken = full_document.model_copy(update={"template_id": "glossy"})
        with pytest.raises(UnknownTemplateError):
            compile_document_sync(broken)


@pytest.mark.asyncio
async def test_compile_document_async(full_document):
    data = await compile_document(full_document)
    assert data[:2] == b"PK"
    assert "Jane Doe" in _all_text(Document(BytesIO(data)))
