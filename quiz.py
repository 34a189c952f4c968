# MULTIPLE CHOICE QUIZ MODULE

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
from schemas import GenerationRequest, QuizSet

router = APIRouter()
logger = logging.getLogger(__name__)

QUIZ_PROFILE = GenerationProfile(
    artifact="quiz",
    prompt_chars=3000,
    temperature=0.7,
    max_tokens=2000,
)

def build_quiz_prompt(text: str) -> str:
    return f"""
Analyseer de volgende cursustekst en maak een quiz van 4-6 meerkeuzevragen in het Nederlands.
Elke vraag moet 4 antwoordmogelijkheden hebben met 1 correct antwoord.

Cursustekst:
{truncate_source(text, QUIZ_PROFILE)}

Geef je antwoord in dit exacte JSON formaat:
{{
  "quiz": [
    {{
      "q": "Vraag hier?",
      "opts": ["Optie 1", "Optie 2", "Optie 3", "Optie 4"],
      "correct": 0
    }}
  ]
}}

De "correct" waarde is de index (0-3) van het juiste antwoord in de opts array."""

@router.post("/generate-quiz")
async def generate_quiz(
    data: GenerationRequest,
    service: CompletionService = Depends(get_completion_service),
):
    """Multiple choice quiz: every question carries exactly 4 options and the index of the right one."""
    text = require_source_text(data.text)

    logger.info("Generating quiz...")
    raw = await request_completion(service, build_quiz_prompt(text), QUIZ_PROFILE)
    parsed = parse_completion(raw, QuizSet)

    logger.info(f"✅ Generated {len(parsed.quiz)} quiz questions")
    return {
        "success": True,
        "quiz": [question.model_dump() for question in parsed.quiz],
    }
