from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from api_client import ARTIFACT_ROUTES, ApiResult

INPUT_TAB = "input"
TABS = (INPUT_TAB, "flashcards", "quiz", "summary", "exam_questions")
UPLOAD_ACTION = "upload"


@dataclass
class StudyState:
    """Everything the page shows, kept for one browser session only.

    Results are only ever replaced by a successful response for the same
    artifact. A failed request sets ``error`` and leaves earlier results alone.
    """

    text: str = ""
    flashcards: List[Dict[str, Any]] = field(default_factory=list)
    quiz: List[Dict[str, Any]] = field(default_factory=list)
    summary: str = ""
    exam_questions: List[Dict[str, Any]] = field(default_factory=list)
    is_processing: bool = False
    active_tab: str = INPUT_TAB
    error: Optional[str] = None
    # action waiting to run on the next pass: an artifact name or UPLOAD_ACTION
    pending: Optional[str] = None

    def can_submit(self) -> bool:
        return bool(self.text.strip()) and not self.is_processing

    def begin(self, action: Optional[str] = None) -> None:
        self.is_processing = True
        self.pending = action
        self.error = None

    def finish(self) -> None:
        """Release the controls, whether or not a result was applied."""
        self.is_processing = False
        self.pending = None

    def apply_generation(self, artifact: str, result: ApiResult) -> None:
        self.is_processing = False
        if not result.ok:
            self.error = result.error
            return
        _, key = ARTIFACT_ROUTES[artifact]
        setattr(self, artifact, result.data.get(key) or _empty_like(getattr(self, artifact)))
        self.active_tab = artifact

    def apply_upload(self, result: ApiResult) -> None:
        self.is_processing = False
        if not result.ok:
            self.error = result.error
            return
        self.text = result.data.get("text", "")
        self.active_tab = INPUT_TAB


def _empty_like(value: Any) -> Any:
    return "" if isinstance(value, str) else []
