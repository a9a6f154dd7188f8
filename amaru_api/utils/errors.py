"""Service-level errors.

Services raise these instead of ``HTTPException`` so they stay usable outside a
request; ``main.py`` maps ``ErrorKind`` to the HTTP status code.
"""
import enum
import functools
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"


STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


class ServiceError(Exception):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class BadRequestError(ServiceError):
    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(ServiceError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ServiceError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT


def service_operation(fn):
    """Re-raise ServiceError as-is; wrap anything else into a BadRequestError.

    The first positional argument must be the SQLAlchemy session, which is
    rolled back before the wrapped error propagates.
    """
    @functools.wraps(fn)
    def wrapper(db: Session, *args, **kwargs):
        try:
            return fn(db, *args, **kwargs)
        except ServiceError:
            db.rollback()
            raise
        except Exception as exc:
            db.rollback()
            logger.exception("Unexpected error in %s", fn.__name__)
            raise BadRequestError("No se pudo completar la operación", detail=str(exc)) from exc
    return wrapper
