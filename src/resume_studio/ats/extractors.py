"""Plain-text extraction from uploaded PDF and DOCX resumes."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path


def extract_pdf_text(data: bytes) -> str:
    import fitz  # pymupdf

    doc = fitz.open(stream=data, filetype="pdf")
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return "\n".join(text)


def extract_docx_text(data: bytes) -> str:
    """Body paragraphs plus table cell text (sidebar layouts live in tables)."""
    from docx import Document

    doc = Document(BytesIO(data))
    lines = [p.text for p in doc.paragraphs if p.text.strip()]
    seen: set = set()
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                # Merged cells repeat the same underlying element
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                lines.extend(p.text for p in cell.paragraphs if p.text.strip())
    return "\n".join(lines)


EXTRACTORS: dict[str, Callable[[bytes], str]] = {
    ".pdf": extract_pdf_text,
    ".docx": extract_docx_text,
}


def extractor_for(filename: str) -> Callable[[bytes], str] | None:
    return EXTRACTORS.get(Path(filename).suffix.lower())
