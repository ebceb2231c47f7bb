"""Error Classifier: maps adapter failures to caller-facing API errors.

Invariants:
    - classify_failure is pure: same (resource, failure) -> same ApiError
    - Malformed ids classify as NotFound, never Internal
    - Already-classified ApiErrors pass through unchanged (classified once)
    - Non-store exceptions never expose their message
"""

from mission_api.core.errors import (
    ApiError, ConflictError, DocumentNotFoundError, DocumentValidationError,
    DuplicateKeyError, InternalError, InvalidInputError, MalformedIdError,
    NotFoundError, StoreError, StoreUnavailableError,
)

GENERIC_INTERNAL_MESSAGE = "An unexpected error occurred"


def classify_failure(resource: str, failure: BaseException) -> ApiError:
    """Classify a failure raised while serving `resource`."""
    match failure:
        case ApiError():
            return failure
        case DuplicateKeyError():
            return ConflictError(f"{resource} with this name already exists")
        case MalformedIdError() | DocumentNotFoundError():
            return NotFoundError(f"{resource} not found")
        case DocumentValidationError(message=message):
            return InvalidInputError(message)
        case StoreUnavailableError(message=message):
            return InternalError(message)
        case StoreError(message=message):
            return InternalError(message)
        case _:
            return InternalError(GENERIC_INTERNAL_MESSAGE)
