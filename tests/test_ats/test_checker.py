"""Tests for the ATS check pipeline."""

from io import BytesIO

import pytest
from docx import Document

from resume_studio.ats.checker import AtsChecker, AtsState
from resume_studio.errors import EmptyDocumentError, ExtractionError, UnsupportedFileError
from resume_studio.export.docx_compiler import compile_document_sync
from resume_studio.export.pdf_fallback import layout_to_pdf_fpdf2
from resume_studio.models.resume import TemplateId
from resume_studio.rendering import render

from test_analyzer import BOUNDARY_TEXT


def _docx_bytes(text: str) -> bytes:
    doc = Document()
    for line in text.splitlines():
        doc.add_paragraph(line)
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestFailures:
    def test_unsupported_extension_rejected_before_extraction(self):
        checker = AtsChecker()
        assert checker.check_sync("resume.txt", b"Experience") is None
        assert checker.error == UnsupportedFileError.user_message
        assert checker.transitions == [AtsState.FAILED, AtsState.IDLE]
        assert checker.state is AtsState.IDLE

    def test_empty_document(self):
        checker = AtsChecker()
        assert checker.check_sync("scan.docx", _docx_bytes("   ")) is None
        assert checker.error == EmptyDocumentError.user_message
        assert "image scan" in checker.error
        assert checker.transitions == [AtsState.EXTRACTING, AtsState.FAILED, AtsState.IDLE]

    def test_extraction_failure(self):
        checker = AtsChecker()
        assert checker.check_sync("broken.docx", b"not a zip archive") is None
        assert checker.error == ExtractionError.user_message
        assert checker.result is None
        assert checker.state is AtsState.IDLE

    def test_recovers_after_failure(self):
        checker = AtsChecker()
        checker.check_sync("resume.odt", b"")
        result = checker.check_sync("resume.docx", _docx_bytes(BOUNDARY_TEXT))
        assert result is not None
        assert checker.error is None
        assert checker.state is AtsState.DONE


class TestSuccess:
    def test_docx_upload(self):
        checker = AtsChecker()
        result = checker.check_sync("Resume.DOCX", _docx_bytes(BOUNDARY_TEXT))
        assert result.score == 67
        assert result.details.file_type == "docx"
        assert checker.result is result
        assert checker.transitions == [AtsState.EXTRACTING, AtsState.ANALYZING, AtsState.DONE]

    def test_sidebar_docx_reads_table_text(self, full_document):
        data = compile_document_sync(full_document.model_copy(update={"template_id": TemplateId.PROFESSIONAL}))
        result = AtsChecker().check_sync("resume.docx", data)
        assert {"experience", "education", "skills", "projects", "summary"} <= set(
            result.details.found_sections
        )
        assert result.details.contact_info_found

    def test_pdf_upload(self, full_document):
        data = layout_to_pdf_fpdf2(render(full_document))
        result = AtsChecker().check_sync("resume.pdf", data)
        assert result is not None
        assert "experience" in result.details.found_sections
        assert result.details.file_type == "pdf"

    @pytest.mark.asyncio
    async def test_async_check_file(self, tmp_path):
        path = tmp_path / "cv.docx"
        path.write_bytes(_docx_bytes(BOUNDARY_TEXT))
        result = await AtsChecker().check_file(path)
        assert result.score == 67
