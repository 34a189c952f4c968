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
from schemas import FlashcardSet, GenerationRequest

router = APIRouter()
logger = logging.getLogger(__name__)

FLASHCARD_PROFILE = GenerationProfile(
    artifact="flashcards",
    prompt_chars=3000,
    temperature=0.7,
    max_tokens=1500,
)

# -----------------------------
# Prompt Engineering
# -----------------------------
def build_flashcard_prompt(text: str) -> str:
    return f"""
Analyseer de volgende cursustekst en maak 6-8 flashcards in het Nederlands.
Elke flashcard moet een vraag (q) en antwoord (a) hebben.
Focus op de belangrijkste concepten, definities en feiten.

Cursustekst:
{truncate_source(text, FLASHCARD_PROFILE)}

Geef je antwoord in dit exacte JSON formaat:
{{
  "flashcards": [
    {{
      "q": "Vraag hier",
      "a": "Antwoord hier"
    }}
  ]
}}"""

# -----------------------------
# Endpoint
# -----------------------------
@router.post("/generate-flashcards")
async def generate_flashcards(
    data: GenerationRequest,
    service: CompletionService = Depends(get_completion_service),
):
    text = require_source_text(data.text)

    logger.info("Generating flashcards...")
    raw = await request_completion(service, build_flashcard_prompt(text), FLASHCARD_PROFILE)
    parsed = parse_completion(raw, FlashcardSet)

    logger.info(f"✅ Generated {len(parsed.flashcards)} flashcards")
    return {
        "success": True,
        "flashcards": [card.model_dump() for card in parsed.flashcards],
    }
