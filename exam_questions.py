# OPEN EXAM QUESTIONS MODULE

from fastapi import APIRouter, Depends
import logging

from completion import (
    CompletionService,
    GenerationProfile,
    get_completion_service,
    parse_completion,
    request_completion,
    require_source_text,
    truncate_source,
)
from schemas import ExamQuestionSet, GenerationRequest

router = APIRouter()
logger = logging.getLogger(__name__)

EXAM_PROFILE = GenerationProfile(
    artifact="exam questions",
    prompt_chars=3000,
    temperature=0.6,
    max_tokens=2000,
)

def build_exam_prompt(text: str) -> str:
    return f"""
Analyseer de volgende cursustekst en maak 4-5 open examenvragen in het Nederlands.
Dit moeten vragen zijn die geschikt zijn voor een universitair examen.

Cursustekst:
{truncate_source(text, EXAM_PROFILE)}

Geef je antwoord in dit exacte JSON formaat:
{{
  "examQuestions": [
    {{
      "q": "Examenvraag hier (uitgebreid en analytisch)?",
      "points": 10,
      "type": "open"
    }}
  ]
}}

Maak vragen die:
- Begrip en toepassing testen
- Analytisch en kritisch denken vereisen
- Geschikt zijn voor 8-15 punten
- Universitair niveau hebben"""

@router.post("/generate-exam-questions")
async def generate_exam_questions(
    data: GenerationRequest,
    service: CompletionService = Depends(get_completion_service),
):
    text = require_source_text(data.text)

    logger.info("Generating exam questions...")
    raw = await request_completion(service, build_exam_prompt(text), EXAM_PROFILE)
    parsed = parse_completion(raw, ExamQuestionSet)

    logger.info(f"✅ Generated {len(parsed.examQuestions)} exam questions")
    return {
        "success": True,
        "examQuestions": [question.model_dump() for question in parsed.examQuestions],
    }
