"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from flashcards.database import Base


class Stack(Base):
    """Named collection of flashcards."""

    __tablename__ = "Stacks"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation of Stack."""
        return f"<Stack(id={self.id}, name='{self.name}')>"


class Flashcard(Base):
    """Front/back card belonging to one stack."""

    __tablename__ = "Flashcards"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    stack_id: Mapped[int] = mapped_column(
        "StackId",
        ForeignKey("Stacks.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    front: Mapped[str] = mapped_column("Front", Text, nullable=False)
    back: Mapped[str] = mapped_column("Back", Text, nullable=False)

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, stack_id={self.stack_id})>"


class StudySession(Base):
    """Recorded study attempt against a stack."""

    __tablename__ = "StudySessions"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    stack_id: Mapped[int] = mapped_column(
        "StackId",
        ForeignKey("Stacks.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    study_time: Mapped[datetime] = mapped_column("StudyTime", DateTime, nullable=False)
    score: Mapped[int] = mapped_column("Score", Integer, nullable=False)

    def __repr__(self) -> str:
        """String representation of StudySession."""
        return f"<StudySession(id={self.id}, stack_id={self.stack_id}, score={self.score})>"
