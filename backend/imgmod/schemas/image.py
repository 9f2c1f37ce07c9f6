"""Image Schemas — response contracts for the moderation queue."""

from datetime import datetime

from pydantic import BaseModel

from imgmod.core.domain_types import ImageStatus


class OwnerRef(BaseModel):
    """Expanded owner reference embedded in an image record."""
    id: str
    email: str


class ImageOut(BaseModel):
    """Image record with its owner expanded."""
    id: str
    url: str
    status: ImageStatus
    owner_id: str | None = None
    owner: OwnerRef | None = None
    created_at: datetime | None = None


class PendingImagesResponse(BaseModel):
    images: list[ImageOut]
