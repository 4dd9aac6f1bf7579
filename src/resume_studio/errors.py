"""Exception hierarchy shared by the rendering, export and ATS layers."""

from __future__ import annotations


class ResumeStudioError(Exception):
    """Base class for every error raised by resume_studio."""


class UnknownTemplateError(ResumeStudioError):
    """A template id outside the closed set reached a renderer or compiler."""


class UnsupportedLocaleError(ResumeStudioError):
    """The requested display locale has no label set."""


class MeasurementError(ResumeStudioError):
    """The rendering surface could not be measured."""


class AtsError(ResumeStudioError):
    """Base class for failures of the ATS pipeline.

    ``user_message`` is the text shown to the person who uploaded the file.
    """

    user_message = "Error parsing file."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class UnsupportedFileError(AtsError):
    user_message = "Unsupported file type. Please upload PDF or DOCX."


class EmptyDocumentError(AtsError):
    user_message = (
        "Could not extract text. If this is a PDF, ensure it is not an image scan."
    )


class ExtractionError(AtsError):
    user_message = "Error parsing file. Please try another PDF or DOCX export."
