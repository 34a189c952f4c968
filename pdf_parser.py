from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging

import fitz  # PyMuPDF

logger = logging.getLogger("pdf_parser")

# -----------------------------
# Extraction result
# -----------------------------
@dataclass
class ExtractedDocument:
    text: str
    page_count: int
    metadata: Dict[str, Any] = field(default_factory=dict)

# -----------------------------
# PDF Processing Class
# -----------------------------
class PDFExtractor:
    """Turns PDF bytes into plain text plus page count and document metadata."""

    # Below this many characters a page is retried with block-level extraction
    sparse_page_chars = 100

    def extract(self, contents: bytes) -> ExtractedDocument:
        with fitz.open(stream=contents, filetype="pdf") as doc:
            if doc.needs_pass:
                raise ValueError("PDF is password protected")

            page_texts = [self._extract_page_text(page) for page in doc]
            metadata = {key: value for key, value in (doc.metadata or {}).items() if value}

            return ExtractedDocument(
                text="\n\n".join(page_texts),
                page_count=doc.page_count,
                metadata=metadata,
            )

    def _extract_page_text(self, page: "fitz.Page") -> str:
        text = page.get_text("text")

        # Try dict extraction for better structure if text is sparse
        if len(text.strip()) < self.sparse_page_chars:
            structured_text = self._extract_from_blocks(page.get_text("dict"))
            if len(structured_text.strip()) > len(text.strip()):
                text = structured_text

        return text

    def _extract_from_blocks(self, blocks_dict: dict) -> str:
        """Extract text from PyMuPDF blocks dictionary"""
        text_parts: List[str] = []

        for block in blocks_dict.get("blocks", []):
            if block.get("type") == 0:  # Text block
                for line in block.get("lines", []):
                    line_text = "".join(span.get("text", "") for span in line.get("spans", []))
                    if line_text.strip():
                        text_parts.append(line_text.strip())

        return "\n".join(text_parts)


def get_pdf_extractor() -> PDFExtractor:
    return PDFExtractor()
