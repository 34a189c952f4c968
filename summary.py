# SUMMARY MODULE - free-form markdown, no parsing step

from fastapi import APIRouter, Depends
import logging

from completion import (
    CompletionService,
    GenerationProfile,
    get_completion_service,
    request_completion,
    require_source_text,
    truncate_source,
)
from schemas import GenerationRequest

router = APIRouter()
logger = logging.getLogger(__name__)

SUMMARY_PROFILE = GenerationProfile(
    artifact="summary",
    prompt_chars=4000,
    temperature=0.6,
    max_tokens=2000,
)

def build_summary_prompt(text: str) -> str:
    return f"""
Maak een uitgebreide samenvatting van de volgende cursustekst in het Nederlands.
Gebruik markdown formatting met headers, bullet points en emphasis waar nodig.
Focus op de hoofdpunten, belangrijke concepten en praktische informatie.

Cursustekst:
{truncate_source(text, SUMMARY_PROFILE)}

Structureer je samenvatting met:
- Een korte inleiding
- Hoofdpunten met bullet points
- Belangrijke concepten met definities
- Conclusie met key takeaways"""

@router.post("/generate-summary")
async def generate_summary(
    data: GenerationRequest,
    service: CompletionService = Depends(get_completion_service),
):
    text = require_source_text(data.text)

    logger.info("Generating summary...")
    summary = await request_completion(service, build_summary_prompt(text), SUMMARY_PROFILE)

    return {"success": True, "summary": summary}
