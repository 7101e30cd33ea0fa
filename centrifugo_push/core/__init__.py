"""Core Layer — domain types, error taxonomy, and the client capability protocol.

Invariants:
    - No module in core/ imports from infrastructure/ (no IO, no httpx)
    - push_protocols.py depends on schemas/ for request/response types only
"""
