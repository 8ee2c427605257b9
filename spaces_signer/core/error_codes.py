from enum import Enum


class ErrorCode(str, Enum):
    MISSING_KEY = "MISSING_KEY"
    INVALID_KEY_PREFIX = "INVALID_KEY_PREFIX"
    PATH_TRAVERSAL = "PATH_TRAVERSAL"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    SERVER_MISCONFIGURED = "SERVER_MISCONFIGURED"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    def __str__(self) -> str:
        return self.value
