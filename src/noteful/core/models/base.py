# Base model for database stuff
from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Common base for all models."""

    __abstract__ = True

    # serial ids, assigned by the store
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def __eq__(self, other: object) -> bool:
        """Equality by primary key if available and same mapped class.

        Lets tests compare ORM instances representing the same row even if
        they're different Python objects (e.g., after refresh/query).
        """
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return NotImplemented  # type: ignore[return-value]
        return self.id is not None and self.id == other.id

    __hash__ = object.__hash__
