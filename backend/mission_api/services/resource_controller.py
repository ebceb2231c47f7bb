"""Resource Controller Base: shared store access and failure funnel.

Invariants:
    - Any exception leaving a decorated operation is an ApiError
    - classify_failure runs exactly once per failure; ApiErrors raised inside
      an operation pass through untouched
    - Client errors log at WARNING, internal errors at ERROR with traceback
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from mission_api.core.classify_error import classify_failure
from mission_api.core.domain_types import Collection, Resource
from mission_api.core.errors import ApiError, DocumentNotFoundError
from mission_api.core.repository_protocols import Document, DocumentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def handle_store_errors(
    operation: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Wrap a controller coroutine so failures surface as classified ApiErrors."""

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(fn)
        async def wrapper(self: "ResourceController", *args: Any, **kwargs: Any) -> T:
            try:
                return await fn(self, *args, **kwargs)
            except Exception as exc:
                error = classify_failure(self.resource.value, exc)
                _log_failure(self.resource.value, operation, error, exc)
                if error is exc:
                    raise
                raise error from exc
        return wrapper

    return decorator


def _log_failure(
    resource: str, operation: str, error: ApiError, cause: Exception,
) -> None:
    extra = {
        "resource": resource,
        "operation": operation,
        "error_code": error.category.value,
    }
    if error.http_status >= 500:
        logger.error(
            f"{resource} {operation} failed: {cause}",
            extra=extra, exc_info=cause,
        )
    else:
        logger.warning(f"{resource} {operation} rejected: {error.message}", extra=extra)


class ResourceController:
    """Base for controllers bound to one collection of the store."""

    resource: Resource
    collection: Collection

    def __init__(self, store: DocumentStore):
        self._store = store

    def _require(self, document: Document | None, document_id: str) -> Document:
        """Return the document or raise the not-found store error for it."""
        if document is None:
            raise DocumentNotFoundError(self.collection.value, document_id)
        return document

    def _deleted_message(self) -> dict:
        return {"message": f"{self.resource.value} deleted successfully"}
