"""Image ORM — the owner reference is optional.

Tests cover:
    - owner_id is nullable and declared ON DELETE SET NULL
    - owner is a scalar relationship that loads as None without an owner
"""

from sqlalchemy import select

from imgmod.models.image import Image


def test_owner_id_is_nullable_set_null_fk():
    column = Image.__table__.c.owner_id
    (fk,) = column.foreign_keys

    assert column.nullable is True
    assert fk.target_fullname == "accounts.id"
    assert fk.ondelete == "SET NULL"


def test_owner_relationship_is_scalar():
    assert Image.__mapper__.relationships["owner"].uselist is False


async def test_ownerless_image_loads_owner_as_none(test_db):
    test_db.add(Image(id="solo", url="https://cdn.test/s.png"))
    await test_db.commit()
    test_db.expunge_all()

    image = (await test_db.execute(select(Image))).scalar_one()

    assert image.owner_id is None
    assert image.owner is None
