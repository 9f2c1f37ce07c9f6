"""Infrastructure Layer — database, record store adapter, auth, logging.

Invariants:
    - Infrastructure implements the protocols declared in core/
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
