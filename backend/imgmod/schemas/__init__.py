"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas never declare a password field
"""
