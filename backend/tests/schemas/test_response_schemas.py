"""Response Schemas — password never survives serialization."""

from imgmod.schemas.account import AccountOut, UsersResponse
from imgmod.schemas.image import ImageOut, PendingImagesResponse


def test_account_out_drops_password():
    record = {"id": "u1", "email": "a@example.com", "role": "user", "password": "hash"}

    dumped = AccountOut.model_validate(record).model_dump()

    assert "password" not in dumped


def test_users_response_keeps_order():
    body = UsersResponse.model_validate({"users": [
        {"id": "u2", "email": "b@example.com", "role": "user"},
        {"id": "u1", "email": "a@example.com", "role": "admin"},
    ]})

    assert [u.id for u in body.users] == ["u2", "u1"]


def test_image_out_accepts_dangling_owner():
    image = ImageOut.model_validate(
        {"id": "i1", "url": "https://cdn.test/i.png", "status": "pending", "owner": None},
    )

    assert image.owner is None


def test_pending_images_response_embeds_owner_email():
    body = PendingImagesResponse.model_validate({"images": [{
        "id": "i1", "url": "https://cdn.test/i.png", "status": "pending",
        "owner_id": "u1", "owner": {"id": "u1", "email": "a@example.com"},
    }]})

    assert body.images[0].owner.email == "a@example.com"
