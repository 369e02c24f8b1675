"""Database models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admin_catalog.database import Base

# Microsecond precision on MySQL; other dialects keep their native type
Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(4000), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(Timestamp, nullable=True)

    def __repr__(self) -> str:
        """String representation of Category."""
        return f"<Category(id={self.id}, name='{self.name}')>"


class Genre(Base):
    """Genre model with its category links."""

    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(Timestamp, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(Timestamp, nullable=True)

    categories: Mapped[list["GenreCategory"]] = relationship(
        back_populates="genre",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="GenreCategory.position",
    )

    def __repr__(self) -> str:
        """String representation of Genre."""
        return f"<Genre(id={self.id}, name='{self.name}')>"


class GenreCategory(Base):
    """One category id at a given position in a genre's category list."""

    __tablename__ = "genres_categories"

    genre_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[str] = mapped_column(String(32), nullable=False)

    genre: Mapped[Genre] = relationship(back_populates="categories")

    def __repr__(self) -> str:
        """String representation of GenreCategory."""
        return (
            f"<GenreCategory(genre_id={self.genre_id}, position={self.position}, "
            f"category_id={self.category_id})>"
        )
