"""
API error types for the Posts service.

Every failure a handler can produce is a DRF `APIException`, so DRF's default
exception handler renders them uniformly as `{"detail": ..., "code": ...}`
with the matching status:

- `BadRequest` (400): request body missing, not a JSON object, or invalid.
- `DataAccessError` (503): the database refused or failed the operation.
- `RenderError` (500): a template could not be found or rendered.
- `RequestTooLarge` (413): body above `MAX_REQUEST_BYTES` (raised by middleware
  as a pre-rendered response, since it runs outside DRF).

`NotFound` is DRF's own `rest_framework.exceptions.NotFound`; it is re-exported
here so callers import all error types from one place.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound

__all__ = ["BadRequest", "DataAccessError", "RenderError", "RequestTooLarge", "NotFound"]


class BadRequest(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request body must be a JSON object."
    default_code = "bad_request"


class DataAccessError(APIException):
    """Persistence failure; the original `DatabaseError` is chained as `__cause__`."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "The data store is unavailable."
    default_code = "data_access_error"


class RenderError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Template rendering failed."
    default_code = "render_error"


class RequestTooLarge(APIException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = "Request entity too large."
    default_code = "request_too_large"
