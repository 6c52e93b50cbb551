from enum import Enum
from typing import Optional

class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

# HTTP status per error kind, used by the API exception handler
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}

class ServiceError(Exception):
    """
    Base class for expected domain failures.
    Each subclass carries a `kind` the API layer switches on.
    """
    kind: ErrorKind

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.field is not None:
            body["field"] = self.field
        return body

class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION

class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND

class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT
