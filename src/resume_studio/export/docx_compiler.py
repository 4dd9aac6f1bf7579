"""Compile a resume into a Word document (resume.docx) with python-docx."""

from __future__ import annotations

import asyncio
import io
import logging

from docx import Document
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Mm, Pt, RGBColor

from resume_studio.locales import Locale
from resume_studio.models.resume import ResumeDocument
from resume_studio.rendering.layouts import TemplateLayout, get_layout
from resume_studio.rendering.view import Entry, ResumeView, Section, build_view

logger = logging.getLogger(__name__)

SERIF_FONT = "Georgia"
SANS_FONT = "Calibri"

FLOWED_ORDER = ("summary", "experience", "projects", "education", "certifications", "skills", "custom")
SIDEBAR_LEFT = ("contact", "skills", "education", "certifications")
SIDEBAR_RIGHT = ("summary", "experience", "projects", "custom")

SIDEBAR_FILL = "F1F5F9"
HEADING_COLOR = RGBColor(0x1E, 0x29, 0x3B)
MUTED_COLOR = RGBColor(0x47, 0x55, 0x69)


async def compile_document(document: ResumeDocument, locale: Locale | str = "en") -> bytes:
    """Build the .docx for ``document`` and return its bytes."""
    layout = get_layout(document.template_id)
    view = build_view(document, locale)
    doc = _build(view, layout)
    data = await asyncio.to_thread(_pack, doc)
    logger.debug(
        "Compiled DOCX for %s (%s mode, %d bytes)",
        layout.template_id.value,
        "sidebar" if layout.has_sidebar else "flowed",
        len(data),
    )
    return data


def compile_document_sync(document: ResumeDocument, locale: Locale | str = "en") -> bytes:
    """Synchronous wrapper for compile_document."""
    return asyncio.run(compile_document(document, locale))


def _pack(doc) -> bytes:
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _build(view: ResumeView, layout: TemplateLayout):
    doc = Document()
    font_name = SERIF_FONT if layout.typeface == "serif" else SANS_FONT

    section = doc.sections[0]
    section.page_width = Mm(210)
    section.page_height = Mm(297)
    for side in ("left_margin", "right_margin", "top_margin", "bottom_margin"):
        setattr(section, side, Mm(15))

    style = doc.styles["Normal"]
    style.font.name = font_name
    style.font.size = Pt(10)

    if layout.has_sidebar:
        _write_header(doc, view, font_name, centered=False, with_contact=False)
        _write_sidebar_table(doc, view, font_name)
    else:
        _write_header(doc, view, font_name, centered=True, with_contact=True)
        for key in FLOWED_ORDER:
            sec = view.section(key)
            if sec:
                _write_section(doc, sec, font_name)
    return doc


def _write_header(doc, view: ResumeView, font_name: str, centered: bool, with_contact: bool) -> None:
    alignment = WD_ALIGN_PARAGRAPH.CENTER if centered else WD_ALIGN_PARAGRAPH.LEFT
    if view.name:
        p = doc.add_paragraph()
        p.alignment = alignment
        run = p.add_run(view.name)
        run.bold = True
        run.font.size = Pt(22)
        run.font.name = font_name
        run.font.color.rgb = HEADING_COLOR
    if view.title:
        p = doc.add_paragraph()
        p.alignment = alignment
        run = p.add_run(view.title)
        run.font.size = Pt(12)
        run.font.color.rgb = MUTED_COLOR
    if with_contact and view.contact:
        p = doc.add_paragraph()
        p.alignment = alignment
        p.paragraph_format.space_after = Pt(8)
        run = p.add_run(" | ".join(item.value for item in view.contact))
        run.font.size = Pt(9)


def _write_sidebar_table(doc, view: ResumeView, font_name: str) -> None:
    table = doc.add_table(rows=1, cols=2)
    table.alignment = WD_TABLE_ALIGNMENT.CENTER
    table.autofit = False
    left, right = table.rows[0].cells
    left.width = Mm(60)
    right.width = Mm(120)
    _shade_cell(left, SIDEBAR_FILL)

    for key in SIDEBAR_LEFT:
        if key == "contact":
            if view.contact:
                _write_heading(left, view.contact_heading, font_name)
                for item in view.contact:
                    left.add_paragraph(item.value)
            continue
        sec = view.section(key)
        if sec:
            _write_section(left, sec, font_name, compact=True)

    for key in SIDEBAR_RIGHT:
        sec = view.section(key)
        if sec:
            _write_section(right, sec, font_name)

    for cell in (left, right):
        _drop_leading_empty_paragraph(cell)


def _write_section(container, section: Section, font_name: str, compact: bool = False) -> None:
    _write_heading(container, section.heading, font_name)
    if section.key == "summary":
        for line in section.lines:
            container.add_paragraph(line)
    elif section.key == "skills":
        names = [entry.title for entry in section.entries]
        if compact:
            for name in names:
                container.add_paragraph(name)
        else:
            container.add_paragraph(", ".join(names))
    else:
        for entry in section.entries:
            _write_entry(container, entry, bold_subtitle=section.key == "experience")


def _write_heading(container, text: str, font_name: str) -> None:
    """Upper-case bold heading with a bottom rule."""
    p = container.add_paragraph()
    p.paragraph_format.space_before = Pt(8)
    p.paragraph_format.space_after = Pt(3)
    run = p.add_run(text.upper())
    run.bold = True
    run.font.size = Pt(11)
    run.font.name = font_name
    run.font.color.rgb = HEADING_COLOR
    _add_bottom_border(p)


def _write_entry(container, entry: Entry, bold_subtitle: bool = False) -> None:
    p = container.add_paragraph()
    p.paragraph_format.space_before = Pt(4)
    p.paragraph_format.space_after = Pt(1)
    if entry.title:
        p.add_run(entry.title).bold = True
    if entry.subtitle:
        if entry.title:
            p.add_run(", ")
        p.add_run(entry.subtitle).bold = bold_subtitle
    if entry.link:
        link_run = p.add_run(f"  {entry.link}")
        link_run.italic = True
        link_run.font.color.rgb = MUTED_COLOR
    if entry.date_range:
        date_run = p.add_run(f"  {entry.date_range}")
        date_run.italic = True
        date_run.font.color.rgb = MUTED_COLOR
    for line in entry.lines:
        container.add_paragraph(line, style="List Bullet")


def _add_bottom_border(paragraph) -> None:
    pPr = paragraph._p.get_or_add_pPr()
    pBdr = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "1E293B")
    pBdr.append(bottom)
    pPr.append(pBdr)


def _shade_cell(cell, fill: str) -> None:
    tcPr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    tcPr.append(shd)


def _drop_leading_empty_paragraph(cell) -> None:
    """Remove the blank paragraph python-docx puts in every new cell."""
    paragraphs = cell.paragraphs
    if len(paragraphs) > 1 and not paragraphs[0].text:
        element = paragraphs[0]._p
        element.getparent().remove(element)
