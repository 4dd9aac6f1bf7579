"""Export compilers: LaTeX source, Word document, printed PDF."""
from resume_studio.export.artifacts import (
    DOCX_MIME,
    EXPORT_FORMATS,
    PDF_MIME,
    TEX_MIME,
    ExportArtifact,
    docx_artifact,
    html_artifact,
    pdf_artifact,
    tex_artifact,
)
from resume_studio.export.docx_compiler import compile_document, compile_document_sync
from resume_studio.export.latex_compiler import compile_source, escape_tex

__all__ = [
    "DOCX_MIME",
    "EXPORT_FORMATS",
    "PDF_MIME",
    "TEX_MIME",
    "ExportArtifact",
    "compile_document",
    "compile_document_sync",
    "compile_source",
    "docx_artifact",
    "escape_tex",
    "html_artifact",
    "pdf_artifact",
    "tex_artifact",
]
