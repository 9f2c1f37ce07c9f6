"""Image ORM — an uploaded image awaiting or past moderation.

Invariants:
    - status is one of ImageStatus values, "pending" on creation
    - owner_id is a weak reference: nullable, SET NULL when the account goes away
    - owner relationship is read-only expansion (no cascade, no backref on Account)
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from imgmod.db.base import Base


class Image(Base):
    """Image entity — moderated by admins."""
    __tablename__ = "images"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: uuid.uuid4().hex,
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", index=True,
    )
    owner_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # None once the owning account is deleted
    owner: Mapped[Optional["Account"]] = relationship("Account", lazy="selectin")
