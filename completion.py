# SHARED COMPLETION PLUMBING FOR THE GENERATION ROUTES

import logging
import re
from dataclasses import dataclass
from typing import Optional, Type, TypeVar

from fastapi.concurrency import run_in_threadpool
from openai import OpenAI
from pydantic import BaseModel, ValidationError

import config
from errors import ExternalServiceError, InvalidInputError, MalformedResponseError

logger = logging.getLogger(__name__)

TEXT_TOO_SHORT = f"Text is too short. Please provide at least {config.MIN_TEXT_LENGTH} characters."

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# -----------------------------
# Per-artifact generation settings
# -----------------------------
@dataclass(frozen=True)
class GenerationProfile:
    artifact: str
    prompt_chars: int
    temperature: float
    max_tokens: int

    @property
    def failure_message(self) -> str:
        return f"Failed to generate {self.artifact}"

# -----------------------------
# Completion service
# -----------------------------
class CompletionService:
    """Thin wrapper around one OpenAI chat completion call.

    The OpenAI client is only built when a call is made, so requests that fail
    validation never touch the API key or the network.
    """

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    def complete(self, prompt: str, temperature: float, max_tokens: int) -> str:
        client = OpenAI(api_key=self.api_key)
        completion = client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return completion.choices[0].message.content or ""


def get_completion_service() -> CompletionService:
    return CompletionService(api_key=config.OPENAI_API_KEY, model=config.OPENAI_MODEL)

# -----------------------------
# Request helpers
# -----------------------------
def require_source_text(text: Optional[str]) -> str:
    if not text or len(text.strip()) < config.MIN_TEXT_LENGTH:
        raise InvalidInputError(TEXT_TOO_SHORT)
    return text


def truncate_source(text: str, profile: GenerationProfile) -> str:
    return text[:profile.prompt_chars]


async def request_completion(service: CompletionService, prompt: str, profile: GenerationProfile) -> str:
    """Single blocking round trip to the completion service, run off the event loop."""
    try:
        return await run_in_threadpool(
            service.complete,
            prompt,
            temperature=profile.temperature,
            max_tokens=profile.max_tokens,
        )
    except Exception as e:
        logger.error(f"{profile.artifact} generation error: {e}")
        raise ExternalServiceError(profile.failure_message, details=str(e))

# -----------------------------
# Response parsing
# -----------------------------
_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL | re.IGNORECASE)


def strip_code_fence(raw: str) -> str:
    match = _CODE_FENCE.match(raw)
    return match.group(1) if match else raw


def parse_completion(raw: str, schema: Type[SchemaT]) -> SchemaT:
    """Validate the model's reply against ``schema`` or raise MalformedResponseError."""
    try:
        return schema.model_validate_json(strip_code_fence(raw))
    except ValidationError as e:
        logger.error(f"JSON parsing error for {schema.__name__}: {e}")
        raise MalformedResponseError("Failed to parse AI response", details="AI returned invalid format")
