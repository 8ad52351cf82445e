# Folder model - a named group of notes
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Folder(BaseModel):
    """Folder that notes are filed under."""

    __tablename__ = "noteful_folders"

    folder_name: Mapped[str] = mapped_column(Text, nullable=False)

    # ids are never reused, SQLite included
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        truncated = self.folder_name if len(self.folder_name or "") <= 30 else (self.folder_name[:30] + "...")
        return f"<Folder(id={self.id}, folder_name='{truncated}')>"
