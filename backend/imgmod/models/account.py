"""Account ORM — persists a registered user.

Invariants:
    - id is a string primary key (uuid4 hex by default)
    - email is unique and non-nullable
    - password holds a hash and is never part of an API response
    - role is "user" or "admin" (AccountRole)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from imgmod.db.base import Base


class Account(Base):
    """Account entity — owner of uploaded images."""
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: uuid.uuid4().hex,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default="user",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
