"""ATS check pipeline: uploaded file -> extracted text -> AtsResult."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path

from resume_studio.ats.analyzer import analyze_text
from resume_studio.ats.extractors import extractor_for
from resume_studio.config import AtsConfig
from resume_studio.errors import (
    AtsError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFileError,
)
from resume_studio.models.ats import AtsResult

logger = logging.getLogger(__name__)


class AtsState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    DONE = "done"
    FAILED = "failed"


class AtsChecker:
    """Runs one upload at a time through extraction and analysis.

    Pipeline errors never escape ``check``: the user-facing message is kept in
    ``error``, the checker passes through FAILED and returns to IDLE.
    """

    def __init__(self, config: AtsConfig | None = None):
        self.config = config or AtsConfig()
        self.state = AtsState.IDLE
        self.result: AtsResult | None = None
        self.error: str | None = None
        self.transitions: list[AtsState] = []

    def _enter(self, state: AtsState) -> None:
        logger.debug("ATS checker: %s -> %s", self.state.value, state.value)
        self.state = state
        self.transitions.append(state)

    async def check(self, filename: str, data: bytes) -> AtsResult | None:
        """Analyze one uploaded file; returns None when the check failed."""
        self.result = None
        self.error = None
        self.transitions = []
        try:
            text = await self._extract(filename, data)
            self._enter(AtsState.ANALYZING)
            result = analyze_text(text, filename, self.config)
        except AtsError as exc:
            logger.warning("ATS check failed for %s: %s", filename, exc)
            self.error = exc.user_message
            self._enter(AtsState.FAILED)
            self._enter(AtsState.IDLE)
            return None
        self.result = result
        self._enter(AtsState.DONE)
        return result

    async def _extract(self, filename: str, data: bytes) -> str:
        extractor = extractor_for(filename)
        if extractor is None:
            raise UnsupportedFileError()
        self._enter(AtsState.EXTRACTING)
        try:
            text = await asyncio.to_thread(extractor, data)
        except Exception as exc:
            logger.exception("Text extraction failed for %s", filename)
            raise ExtractionError() from exc
        if not text or not text.strip():
            raise EmptyDocumentError()
        return text

    async def check_file(self, path: str | Path) -> AtsResult | None:
        path = Path(path)
        return await self.check(path.name, path.read_bytes())

    def check_sync(self, filename: str, data: bytes) -> AtsResult | None:
        """Synchronous wrapper for check."""
        return asyncio.run(self.check(filename, data))
