"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/)
    - Path ids are plain strings so malformed ids reach the store and map to 404
"""
