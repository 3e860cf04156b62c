"""
Flavorbase Backend: User Profile and Flavor Note Models
=========================================================

What:  Public user profiles and the free-text notes users keep on flavors.
Who:   Queried by GET /flavor/{flavorId}/notes.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.flavor import Flavor


class UserProfile(Base):
    """Public profile attributes of a registered user."""

    __tablename__ = "user_profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<UserProfile(id={self.id}, name='{self.name}')>"


class UserFlavorNote(Base):
    """
    A user's note on a flavor.

    Primary key is (user_id, flavor_id): one note per user per flavor.
    """

    __tablename__ = "user_flavor_note"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profile.id", ondelete="CASCADE"),
        primary_key=True,
    )
    flavor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("flavor.id", ondelete="CASCADE"),
        primary_key=True,
    )
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    flavor: Mapped["Flavor"] = relationship(lazy="raise")
    user_profile: Mapped["UserProfile"] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<UserFlavorNote(user_id={self.user_id}, flavor_id={self.flavor_id})>"
