"""In-memory editing store producing immutable document snapshots.

Every mutation replaces ``document`` with a new ``ResumeDocument`` and bumps
``revision``; callers that hold an older snapshot keep seeing it unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from resume_studio.models.resume import (
    Certification,
    CustomItem,
    Education,
    Experience,
    Project,
    ResumeDocument,
    Skill,
    TemplateId,
)

# collection attribute -> entry model
COLLECTIONS: dict[str, type[BaseModel]] = {
    "experience": Experience,
    "projects": Project,
    "education": Education,
    "certifications": Certification,
    "skills": Skill,
    "custom_items": CustomItem,
}


def _merge(model: BaseModel, changes: dict[str, Any]) -> BaseModel:
    unknown = set(changes) - set(type(model).model_fields) - {"id"}
    if unknown:
        raise ValueError(f"Unknown field(s) for {type(model).__name__}: {sorted(unknown)}")
    if "id" in changes:
        raise ValueError("Entry ids cannot be changed")
    # Re-validate so the merged entry obeys the same constraints as a new one
    return type(model).model_validate({**model.model_dump(), **changes})


class ResumeStore:
    """Holds the current resume snapshot for one editing session."""

    def __init__(self, document: ResumeDocument | None = None):
        self._document = document or ResumeDocument()
        self._revision = 0

    @property
    def document(self) -> ResumeDocument:
        return self._document

    @property
    def revision(self) -> int:
        return self._revision

    def _commit(self, document: ResumeDocument) -> ResumeDocument:
        self._document = document
        self._revision += 1
        return document

    # -- top-level fields ----------------------------------------------------

    def set_template(self, template_id: TemplateId | str) -> ResumeDocument:
        return self._commit(
            self._document.model_copy(update={"template_id": TemplateId(template_id)})
        )

    def set_personal(self, **changes: Any) -> ResumeDocument:
        info = _merge(self._document.personal_info, changes)
        return self._commit(self._document.model_copy(update={"personal_info": info}))

    def set_custom_section_title(self, title: str) -> ResumeDocument:
        return self._commit(
            self._document.model_copy(update={"custom_section_title": title})
        )

    def reset(self) -> ResumeDocument:
        return self._commit(ResumeDocument())

    # -- collections ---------------------------------------------------------

    def add(self, collection: str, **fields: Any) -> str:
        """Append a new entry with a fresh id and return that id."""
        model = self._model_for(collection)
        entry = model(**fields)
        entries = (*getattr(self._document, collection), entry)
        self._commit(self._document.model_copy(update={collection: entries}))
        return entry.id

    def update(self, collection: str, entry_id: str, **changes: Any) -> ResumeDocument:
        self._model_for(collection)
        entries = getattr(self._document, collection)
        if not any(e.id == entry_id for e in entries):
            raise KeyError(f"No {collection} entry with id {entry_id!r}")
        updated = tuple(_merge(e, changes) if e.id == entry_id else e for e in entries)
        return self._commit(self._document.model_copy(update={collection: updated}))

    def remove(self, collection: str, entry_id: str) -> ResumeDocument:
        self._model_for(collection)
        entries = getattr(self._document, collection)
        kept = tuple(e for e in entries if e.id != entry_id)
        if len(kept) == len(entries):
            raise KeyError(f"No {collection} entry with id {entry_id!r}")
        return self._commit(self._document.model_copy(update={collection: kept}))

    @staticmethod
    def _model_for(collection: str) -> type[BaseModel]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None
