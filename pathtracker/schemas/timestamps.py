"""
Timestamp helpers for pathtracker.

All stored timestamps are timezone-aware. Naive values, whether parsed from
a document or passed in by a caller, are taken to be UTC.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a naive datetime; aware values keep their offset."""
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=timezone.utc)


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Evaluation time: the given moment as an aware datetime, else the current UTC time."""
    return as_utc(now) if now is not None else utc_now()


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
