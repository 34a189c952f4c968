from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

import config

# artifact -> (route, key holding the result in the response body)
ARTIFACT_ROUTES: Dict[str, tuple] = {
    "flashcards": ("/api/generate-flashcards", "flashcards"),
    "quiz": ("/api/generate-quiz", "quiz"),
    "summary": ("/api/generate-summary", "summary"),
    "exam_questions": ("/api/generate-exam-questions", "examQuestions"),
}


@dataclass
class ApiResult:
    """Outcome of one backend call: either ``data`` (ok) or an ``error`` message."""

    ok: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "ApiResult":
        return cls(ok=False, error=error)


class LearnlyClient:
    def __init__(self, base_url: str = config.LEARNLY_API_BASE, timeout: Optional[float] = config.LEARNLY_API_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def health(self) -> ApiResult:
        return self._call("get", "/api/health")

    def upload_pdf(self, filename: str, contents: bytes) -> ApiResult:
        files = {"pdf": (filename, contents, config.PDF_MIME_TYPE)}
        return self._call("post", "/api/upload-pdf", files=files)

    def generate(self, artifact: str, text: str) -> ApiResult:
        route, _ = ARTIFACT_ROUTES[artifact]
        return self._call("post", route, json={"text": text})

    def _call(self, method: str, path: str, **kwargs) -> ApiResult:
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            response = getattr(self.session, method)(f"{self.base_url}{path}", **kwargs)
        except requests.RequestException as e:
            return ApiResult.failure(f"Could not reach the Learnly backend: {e}")

        try:
            body = response.json()
        except ValueError:
            body = {}

        if 200 <= response.status_code < 300:
            return ApiResult(ok=True, data=body)
        return ApiResult.failure(_error_message(body, response.status_code))


def _error_message(body: Any, status_code: int) -> str:
    if not isinstance(body, dict) or not body.get("error"):
        return f"Request failed with status {status_code}"
    if body.get("details"):
        return f"{body['error']}: {body['details']}"
    return body["error"]
