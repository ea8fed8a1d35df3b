"""
Database models for Hackernews (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from datetime import UTC, datetime

from sqlalchemy import (
    DateTime,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Text,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Links(Base):
    __tablename__ = "links"
    __table_args__ = (PrimaryKeyConstraint("id", name="links_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), default=_utcnow, server_default=text("CURRENT_TIMESTAMP")
    )

    comments: Mapped[list["Comments"]] = relationship(
        "Comments", uselist=True, back_populates="link"
    )


class Comments(Base):
    __tablename__ = "comments"
    __table_args__ = (
        ForeignKeyConstraint(
            ["link_id"],
            ["links.id"],
            ondelete="CASCADE",
            name="comments_link_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="comments_pkey"),
        Index("idx_comments_link", "link_id"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), default=_utcnow, server_default=text("CURRENT_TIMESTAMP")
    )
    link_id: Mapped[int] = mapped_column(Integer, nullable=False)

    link: Mapped["Links"] = relationship("Links", back_populates="comments")


target_metadata = Base.metadata

__all__ = ["Base", "Links", "Comments", "target_metadata"]
