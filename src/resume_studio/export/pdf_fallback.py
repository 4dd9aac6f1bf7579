"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from fpdf import FPDF

from resume_studio.rendering.blocks import parse_blocks
from resume_studio.rendering.engine import RenderedLayout

logger = logging.getLogger(__name__)

# Unicode-capable font search paths (Linux, macOS, Windows)
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

# Base sizes in pt at scale 1.0: (font size, line height in mm)
_SIZES = {
    "h1": (20, 10),
    "h2": (12, 7),
    "h3": (10.5, 5.5),
    "text": (10, 5),
    "bullet": (10, 5),
}

_LATIN1_REPLACEMENTS = {"\u2013": "-", "\u2014": "-", "\u2022": "-", "\u2019": "'"}


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def layout_to_pdf_fpdf2(layout: RenderedLayout) -> bytes:
    """Fallback PDF generation using fpdf2 when WeasyPrint is unavailable."""
    scale, spacing = layout.fit.scale, layout.fit.spacing

    pdf = FPDF(format="A4")
    pdf.set_auto_page_break(auto=True, margin=12)
    pdf.set_margins(14, 12, 14)
    pdf.add_page()

    font_name = "Helvetica"
    font_path = _find_unicode_font()
    if font_path:
        pdf.add_font("ResumeSans", "", font_path)
        font_name = "ResumeSans"
    pdf.set_font(font_name, size=10 * scale)

    first_section = True
    for block in parse_blocks(layout.html):
        if block.kind == "section":
            if not first_section:
                pdf.ln(4 * spacing)
            first_section = False
            continue
        if block.kind == "entry":
            pdf.ln(1.5 * spacing)
            continue

        size, height = _SIZES.get(block.kind, _SIZES["text"])
        pdf.set_font_size(size * scale)
        text = _safe_text(block.text, pdf)
        if block.kind == "bullet":
            text = f"  - {text}"
        pdf.multi_cell(0, height * scale, text, new_x="LMARGIN", new_y="NEXT")
        if block.kind == "h2":
            y = pdf.get_y()
            pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
            pdf.ln(1)

    buf = BytesIO()
    pdf.output(buf)
    logger.debug("fpdf2 fallback produced %d pages", pdf.pages_count)
    return buf.getvalue()


def _safe_text(text: str, pdf: FPDF) -> str:
    """Ensure text is encodable by the current font. Replace if needed."""
    if pdf.is_ttf_font:
        return text
    # Built-in fonts (Helvetica etc.) only cover latin-1
    for char, replacement in _LATIN1_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")
