"""Boundary Protocols — the RecordStore contract between handlers and persistence.

Invariants:
    - Handlers depend on RecordStore only, never on a concrete client
    - Every method is async; failures are raised, never returned as values
    - Returned records are plain dicts; callers may pass them through untouched
    - delete_by_id returns the prior record, or None when no record matched

Design Decisions:
    - Protocol over ABC: structural subtyping, test stubs need no inheritance
    - Collection enum as first argument: one interface spans accounts and images
"""

from typing import Any, Mapping, Protocol, Sequence

from imgmod.core.domain_types import Collection, Record


class RecordStore(Protocol):
    """Contract for document-style record persistence — implemented by shell."""

    async def find_by_filter(
        self, collection: Collection, filter: Mapping[str, Any],
    ) -> list[Record]: ...

    async def find_by_filter_expanded(
        self,
        collection: Collection,
        filter: Mapping[str, Any],
        relation: str,
        fields: Sequence[str],
    ) -> list[Record]: ...

    async def find_all_projected(
        self, collection: Collection, exclude: Sequence[str],
    ) -> list[Record]: ...

    async def delete_by_id(
        self, collection: Collection, record_id: str,
    ) -> Record | None: ...
