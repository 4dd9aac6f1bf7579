"""Measure the content height of a rendered layout, in CSS pixels."""

from __future__ import annotations

import logging
import math
from typing import Protocol

from resume_studio.errors import MeasurementError
from resume_studio.rendering.blocks import Block, parse_blocks
from resume_studio.rendering.engine import RenderedLayout

logger = logging.getLogger(__name__)

PAGE_WIDTH_PX = 794.0


class Measurer(Protocol):
    def measure(self, layout: RenderedLayout) -> float | None:
        """Content height in px, or None when the surface cannot be measured."""
        ...


class WeasyPrintMeasurer:
    """Lay the page out with WeasyPrint on an unbounded sheet and read its height."""

    # Taller than any resume; keeps the whole layout on one sheet
    SHEET_HEIGHT_PX = 20000

    def measure(self, layout: RenderedLayout) -> float | None:
        try:
            from weasyprint import CSS, HTML
        except (ImportError, OSError) as exc:
            raise MeasurementError(f"WeasyPrint not available: {exc}") from exc

        sheet = CSS(
            string=(
                f"@page {{ size: {PAGE_WIDTH_PX}px {self.SHEET_HEIGHT_PX}px !important;"
                " margin: 0 !important; }"
            )
        )
        try:
            document = HTML(string=layout.html).render(stylesheets=[sheet])
        except Exception as exc:
            raise MeasurementError(f"WeasyPrint layout failed: {exc}") from exc
        if len(document.pages) != 1:
            raise MeasurementError(f"Layout spans {len(document.pages)} sheets")
        root = document.pages[0]._page_box.children
        if not root:
            return None
        return float(root[0].margin_height())


# (font size in em of the base size, vertical margin after the block in base px)
_BLOCK_METRICS = {
    "h1": (2.6, 4.0),
    "h2": (1.2, 6.0),
    "h3": (1.05, 0.0),
    "text": (1.0, 2.0),
    "bullet": (1.0, 0.0),
}


class EstimatingMeasurer:
    """Text-metrics estimate used where no layout engine is installed.

    Wraps each block by an average character width, scales glyph metrics by
    ``fit.scale`` and inter-section/inter-item gaps by ``fit.spacing``. The
    estimate is monotonic in both parameters.
    """

    base_font_px = 13.33
    line_height = 1.4
    char_width_em = 0.5
    padding_px = 40.0
    section_gap_px = 18.0
    entry_gap_px = 10.0
    header_gap_px = 24.0
    sidebar_fraction = 1 / 3

    def measure(self, layout: RenderedLayout) -> float | None:
        blocks = parse_blocks(layout.html)
        if not blocks:
            return None
        scale, spacing = layout.fit.scale, layout.fit.spacing
        content_width = PAGE_WIDTH_PX - 2 * self.padding_px

        if layout.has_sidebar:
            aside_width = content_width * self.sidebar_fraction
            main_width = content_width - aside_width
        else:
            aside_width = main_width = content_width

        header = [b for b in blocks if b.region == "header"]
        aside = [b for b in blocks if b.region == "aside"]
        main = [b for b in blocks if b.region == "main"]

        header_h = self._column(header, content_width, scale, spacing)
        if header:
            header_h += self.header_gap_px * spacing
        body_h = max(
            self._column(aside, aside_width, scale, spacing),
            self._column(main, main_width, scale, spacing),
        )
        return 2 * self.padding_px + header_h + body_h

    def _column(self, blocks: list[Block], width: float, scale: float, spacing: float) -> float:
        height = 0.0
        seen_section = seen_entry = False
        for block in blocks:
            if block.kind == "section":
                if seen_section:
                    height += self.section_gap_px * spacing
                seen_section, seen_entry = True, False
                continue
            if block.kind == "entry":
                if seen_entry:
                    height += self.entry_gap_px * spacing
                seen_entry = True
                continue
            em, margin = _BLOCK_METRICS.get(block.kind, _BLOCK_METRICS["text"])
            font_px = self.base_font_px * em * scale
            chars_per_line = max(1, int(width / (font_px * self.char_width_em)))
            lines = max(1, math.ceil(len(block.text) / chars_per_line))
            height += lines * font_px * self.line_height + margin * scale
        return height


def safe_measure(measurer: Measurer, layout: RenderedLayout) -> float | None:
    """Measure, mapping failures and degenerate heights to None."""
    try:
        height = measurer.measure(layout)
    except MeasurementError as exc:
        logger.warning("Layout measurement unavailable: %s", exc)
        return None
    if height is None or not math.isfinite(height) or height <= 0:
        return None
    return height
