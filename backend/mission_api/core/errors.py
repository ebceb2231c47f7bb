"""Error Hierarchy: tagged store failures and the API errors they classify into.

Invariants:
    - The persistence adapter raises only StoreError subclasses
    - Every ApiError carries an http_status and renders as {"error": <message>}
    - No driver text or traceback ever reaches an ApiError message

Design Decisions:
    - Two hierarchies: StoreError tags what went wrong in the adapter, ApiError
      says what the caller sees. core/classify_error.py is the only bridge.
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """Failure classes exposed to API callers."""
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INTERNAL = "internal"


# ─── Store Errors (raised by the persistence adapter) ───────────

class StoreError(Exception):
    """Base exception for every persistence adapter failure."""

    def __init__(self, message: str, collection: str | None = None):
        super().__init__(message)
        self.message = message
        self.collection = collection


class DuplicateKeyError(StoreError):
    """A write collided with a unique index."""
    def __init__(self, collection: str, field: str):
        super().__init__(
            f"Duplicate key on {collection}.{field}", collection,
        )
        self.field = field


class MalformedIdError(StoreError):
    """An identifier does not match the store's native id format."""
    def __init__(self, collection: str, value: object):
        super().__init__(f"Malformed identifier: {value!r}", collection)
        self.value = value


class DocumentNotFoundError(StoreError):
    """A well-formed identifier matched no document."""
    def __init__(self, collection: str, document_id: str):
        super().__init__(
            f"No document {document_id!r} in {collection}", collection,
        )
        self.document_id = document_id


class DocumentValidationError(StoreError):
    """A document violates its collection schema (required field, enum)."""
    def __init__(self, collection: str, problems: list[str]):
        super().__init__(
            f"{collection} validation failed: {'; '.join(problems)}",
            collection,
        )
        self.problems = problems


class StoreUnavailableError(StoreError):
    """The store could not be reached or the driver failed."""
    def __init__(self, operation: str, collection: str | None = None):
        super().__init__(f"Database {operation} failed", collection)
        self.operation = operation


# ─── API Errors (what callers see) ──────────────────────────────

class ApiError(Exception):
    """Base exception for classified, caller-facing failures."""

    category: ErrorCategory = ErrorCategory.INTERNAL
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class ConflictError(ApiError):
    """Uniqueness constraint violated. Reported as 400, not 409."""
    category = ErrorCategory.CONFLICT
    http_status = 400


class NotFoundError(ApiError):
    """Absent entity or malformed identifier."""
    category = ErrorCategory.NOT_FOUND
    http_status = 404


class InvalidInputError(ApiError):
    """Request data rejected by schema validation. Surfaces as 500 like Internal."""
    category = ErrorCategory.INVALID_INPUT
    http_status = 500


class InternalError(ApiError):
    """Everything else, including loss of store connectivity."""
    category = ErrorCategory.INTERNAL
    http_status = 500
