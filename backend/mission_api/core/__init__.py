"""Core Layer: error taxonomy, classification and adapter contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
