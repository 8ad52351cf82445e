"""Note service implementation."""

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..sanitize import clean_content, escape_text
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..validation import first_missing, is_missing, supplied_fields
from .interfaces import INoteService

logger = get_logger("services.notes")

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("note_name", "content", "folder_id")

# The only fields a PATCH may touch.
UPDATABLE_FIELDS = ("note_name", "content", "folder_id")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, note_repo: NoteRepository):
        self.note_repo = note_repo

    async def list_notes(self) -> List[NoteResponse]:
        notes = await self.note_repo.list_all()
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, note_id: int) -> NoteResponse:
        note = await self._get_or_404(note_id)
        return NoteResponse.model_validate(note)

    async def create_note(self, request: NoteCreate) -> NoteResponse:
        """Create new note; ``modified`` defaults to now."""
        # checked after cleaning: markup that sanitizes away counts as missing
        note_data = self._sanitize(request.model_dump(include=set(REQUIRED_FIELDS)))
        missing = first_missing(note_data, REQUIRED_FIELDS)
        if missing:
            raise ValidationError(f"Missing '{missing}' in request body", field=missing)

        note_data["modified"] = request.modified or datetime.now(timezone.utc)

        note = await self.note_repo.create(note_data)
        logger.info(f"Created note {note.id} in folder {note.folder_id}")
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: int, request: NoteUpdate) -> None:
        """Merge the supplied subset of fields and bump ``modified``.

        Existence is checked before the payload, so an unknown id is a 404
        even when the body is empty.
        """
        note = await self._get_or_404(note_id)

        payload = request.model_dump(include=set(UPDATABLE_FIELDS))
        fields = supplied_fields(payload, UPDATABLE_FIELDS)
        if not fields:
            raise ValidationError(
                "Request body must contain either 'note_name', 'content' or 'folder_id'"
            )

        update_data = self._sanitize({field: payload[field] for field in fields})
        emptied = [field for field in fields if is_missing(update_data[field])]
        if emptied:
            raise ValidationError(f"Invalid '{emptied[0]}' in request body", field=emptied[0])
        update_data["modified"] = datetime.now(timezone.utc)

        await self.note_repo.update(note, update_data)
        logger.info(f"Updated note {note_id}", extra={"fields": fields})

    async def delete_note(self, note_id: int) -> None:
        note = await self._get_or_404(note_id)
        await self.note_repo.delete(note)
        logger.info(f"Deleted note {note_id}")

    async def _get_or_404(self, note_id: int) -> Note:
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            logger.debug(f"Note {note_id} not found")
            raise NotFoundError("Note", note_id)
        return note

    @staticmethod
    def _sanitize(data: Dict[str, Any]) -> Dict[str, Any]:
        """Clean whichever text fields are supplied."""
        if not is_missing(data.get("note_name")):
            data["note_name"] = escape_text(data["note_name"])
        if not is_missing(data.get("content")):
            data["content"] = clean_content(data["content"])
        return data
