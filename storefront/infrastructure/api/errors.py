from typing import Any, Dict

from fastapi import HTTPException

from storefront.domain.shared import DomainException


def to_http_exception(exc: Exception) -> HTTPException:
    """Map a use case failure to a 500 response.

    Validation, precondition and lookup failures are not told apart yet;
    the payload carries the domain error so clients can inspect it.
    """
    if isinstance(exc, DomainException):
        detail: Dict[str, Any] = exc.to_dict()
    else:
        detail = {"type": exc.__class__.__name__, "message": str(exc), "details": {}}
    return HTTPException(status_code=500, detail=detail)
