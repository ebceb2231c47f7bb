"""Mission Control API: CRUD backend for missions, incidents and users.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
