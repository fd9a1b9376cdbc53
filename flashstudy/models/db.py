"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from flashstudy.models.card import Difficulty


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class FlashcardDB(Base):
    """
    A flashcard stored in the database.

    Holds the card content plus its rating state. Timestamps are written
    by the application so that a rating can stamp last_studied_at and
    updated_at with one shared value.
    """

    __tablename__ = "flashcards"
    # Deleted ids must never be handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    front: Mapped[str] = mapped_column(Text)
    back: Mapped[str] = mapped_column(Text)

    # Rating state
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(
            Difficulty,
            name="flashcard_difficulty",
            values_callable=lambda enum: [member.value for member in enum],
            validate_strings=True,
        ),
        default=Difficulty.NOT_STUDIED,
        index=True,
    )
    study_count: Mapped[int] = mapped_column(Integer, default=0)
    last_studied_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return (
            f"<FlashcardDB(id={self.id}, difficulty={self.difficulty}, "
            f"study_count={self.study_count})>"
        )
