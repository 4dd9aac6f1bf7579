"""Print an already fitted layout to a one-page PDF."""

from __future__ import annotations

import logging

from resume_studio.rendering.engine import RenderedLayout

logger = logging.getLogger(__name__)


def print_pdf(layout: RenderedLayout) -> bytes:
    """Convert the scaled layout to PDF bytes using WeasyPrint, with fpdf2 fallback.

    The layout is printed as is: whatever scale and spacing the auto-fit pass
    chose are already baked into its stylesheet.
    """
    try:
        from weasyprint import HTML
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from resume_studio.export.pdf_fallback import layout_to_pdf_fpdf2

        return layout_to_pdf_fpdf2(layout)
    return HTML(string=layout.html).write_pdf()
