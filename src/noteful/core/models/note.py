# Note model for user content
from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import UTCDateTime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(BaseModel):
    """Note with content, filed under a folder."""

    __tablename__ = "noteful_notes"

    note_name: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    modified: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=_utcnow)

    # deleting a folder takes its notes with it
    folder_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("noteful_folders.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_noteful_notes_folder_id", "folder_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        truncated = self.note_name if len(self.note_name or "") <= 30 else (self.note_name[:30] + "...")
        return f"<Note(id={self.id}, note_name='{truncated}', folder_id={self.folder_id})>"
