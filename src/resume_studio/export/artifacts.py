"""Named, typed export payloads ready to be written or downloaded."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from resume_studio.export.docx_compiler import compile_document
from resume_studio.export.latex_compiler import compile_source
from resume_studio.export.pdf_renderer import print_pdf
from resume_studio.fitting.autofit import AutoFitScaler
from resume_studio.locales import Locale
from resume_studio.models.resume import ResumeDocument
from resume_studio.rendering.engine import render

TEX_MIME = "text/x-tex"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME = "application/pdf"
HTML_MIME = "text/html"

EXPORT_FORMATS = ("tex", "docx", "pdf", "html")


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime_type: str
    content: bytes

    def write(self, directory: str | Path) -> Path:
        path = Path(directory) / self.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        return path


def tex_artifact(document: ResumeDocument, locale: Locale | str = "en") -> ExportArtifact:
    source = compile_source(document, locale)
    return ExportArtifact("resume.tex", TEX_MIME, source.encode("utf-8"))


async def docx_artifact(document: ResumeDocument, locale: Locale | str = "en") -> ExportArtifact:
    return ExportArtifact("resume.docx", DOCX_MIME, await compile_document(document, locale))


def pdf_artifact(
    document: ResumeDocument,
    locale: Locale | str = "en",
    scaler: AutoFitScaler | None = None,
) -> ExportArtifact:
    """Fit the layout to one page (when a scaler is given) and print it."""
    return ExportArtifact("resume.pdf", PDF_MIME, print_pdf(_layout(document, locale, scaler)))


def html_artifact(
    document: ResumeDocument,
    locale: Locale | str = "en",
    scaler: AutoFitScaler | None = None,
) -> ExportArtifact:
    layout = _layout(document, locale, scaler)
    return ExportArtifact("resume.html", HTML_MIME, layout.html.encode("utf-8"))


def _layout(document: ResumeDocument, locale: Locale | str, scaler: AutoFitScaler | None):
    if scaler is None:
        return render(document, locale)
    return scaler.fit(document, locale).layout
