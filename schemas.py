from typing import List, Literal, Optional

from pydantic import BaseModel, Field, StrictStr

# -----------------------------
# Requests
# -----------------------------
class GenerationRequest(BaseModel):
    text: Optional[StrictStr] = None

# -----------------------------
# Artifacts returned by the completion service
# -----------------------------
class Flashcard(BaseModel):
    q: str = Field(..., min_length=1)
    a: str = Field(..., min_length=1)

class FlashcardSet(BaseModel):
    flashcards: List[Flashcard]

class QuizQuestion(BaseModel):
    q: str = Field(..., min_length=1)
    opts: List[str] = Field(..., min_length=4, max_length=4)
    correct: int = Field(..., ge=0, le=3)

class QuizSet(BaseModel):
    quiz: List[QuizQuestion]

class ExamQuestion(BaseModel):
    q: str = Field(..., min_length=1)
    points: int
    type: Literal["open"] = "open"

class ExamQuestionSet(BaseModel):
    examQuestions: List[ExamQuestion]
