"""Route Modules — one file per caller scope.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
"""
