"""
SQLAlchemy ORM models for persistent storage.

A saved deck is stored as its name and deck code; the card list is
rebuilt from the code when the deck is opened.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SavedDeckDB(Base):
    """
    A named deck saved by the user.

    Saving under an existing name replaces that deck's code.
    """

    __tablename__ = "saved_decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    code: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<SavedDeckDB(id={self.id}, name={self.name})>"
