"""Infrastructure Layer — HTTP transport, client implementations, logging setup.

Invariants:
    - All httpx failures mapped to CentrifugoError (core/errors.py)
"""
