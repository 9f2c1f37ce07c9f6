"""ORM Models — SQLAlchemy declarative models for accounts and images.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references resolve
"""

from imgmod.models.account import Account  # noqa: F401
from imgmod.models.image import Image  # noqa: F401
