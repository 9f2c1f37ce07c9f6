"""Services Layer — request handlers over the injected RecordStore.

Invariants:
    - One handler file per caller scope (account owner, admin)
    - Handlers receive their collaborators as arguments (no module-level clients)
"""
