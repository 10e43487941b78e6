"""
DeckSnapshot model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeckSnapshot(SQLModel, table=True):
    """DeckSnapshot table - the whole deck collection stored as one JSON document."""
    __tablename__ = "deck_snapshots"

    key: str = Field(primary_key=True)
    payload: str = Field(sa_column=Column(Text, nullable=False))  # JSON list of decks
    updated_at: datetime = Field(default_factory=_utcnow)
