"""Infrastructure Layer: database engine, document store adapter and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every SQLAlchemy failure leaving this layer is a StoreError (core/errors.py)
"""
