"""ATS compatibility checking for uploaded resumes."""
from resume_studio.ats.analyzer import ACTION_VERBS, analyze_text
from resume_studio.ats.checker import AtsChecker, AtsState
from resume_studio.ats.extractors import extract_docx_text, extract_pdf_text

__all__ = [
    "ACTION_VERBS",
    "AtsChecker",
    "AtsState",
    "analyze_text",
    "extract_docx_text",
    "extract_pdf_text",
]
