from typing import Any

from spaces_signer.core.error_codes import ErrorCode


class ApiError(Exception):
    """Client-facing failure; only `message` ever reaches the response body."""

    def __init__(self, status_code: int, code: ErrorCode | str, message: str):
        self.status_code = status_code
        self.code = str(code)
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        # Clients read a flat {"error": message}; no code or nesting on the wire.
        return {"error": self.message}
