"""Pydantic Schemas — request/response records for the Centrifugo push API.

Invariants:
    - Every record is frozen (immutable value)
    - Field names match Centrifugo's snake_case JSON keys
"""
