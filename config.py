import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# --- OpenAI ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")

# --- Server ---
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "*"))

# --- Validation limits ---
MIN_TEXT_LENGTH = 50
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB
PDF_MIME_TYPE = "application/pdf"

# --- Streamlit client ---
LEARNLY_API_BASE = os.getenv("LEARNLY_API_BASE", "http://127.0.0.1:5000")


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


LEARNLY_API_TIMEOUT = _optional_float(os.getenv("LEARNLY_API_TIMEOUT"))
