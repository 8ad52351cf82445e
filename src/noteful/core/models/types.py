"""Custom SQLAlchemy types for Noteful models with cross-DB support."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, TypeDecorator


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime that always round-trips as UTC.

    - On PostgreSQL: ``TIMESTAMP WITH TIME ZONE``, values come back aware
    - On SQLite (and others): the offset is dropped by the driver, so naive
      values read back are tagged as UTC

    Naive values bound as parameters are assumed to already be UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
