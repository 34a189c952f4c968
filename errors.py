from typing import Any, Dict, Optional


class LearnlyError(Exception):
    """Base error rendered as ``{"error": ..., "details": ...}`` by the app."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        return error_body(self.error, self.details)


class InvalidInputError(LearnlyError):
    """Rejected before any external call: missing file, wrong type, too large, short text."""

    status_code = 400


class ExternalServiceError(LearnlyError):
    """PDF extraction or the completion service failed."""

    status_code = 500


class MalformedResponseError(LearnlyError):
    """The completion service answered with something that doesn't fit the requested shape."""

    status_code = 500


def error_body(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return body
