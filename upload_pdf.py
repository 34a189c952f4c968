# upload_pdf.py

from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

import config
from errors import ExternalServiceError, InvalidInputError
from pdf_parser import PDFExtractor, get_pdf_extractor

router = APIRouter()
logger = logging.getLogger(__name__)

FILE_TOO_LARGE = f"File too large. Max size is {config.MAX_UPLOAD_BYTES // (1024 * 1024)}MB."

@router.post("/upload-pdf")
async def upload_pdf(
    pdf: Optional[UploadFile] = File(None),
    extractor: PDFExtractor = Depends(get_pdf_extractor),
):
    """
    Upload a PDF, extract its text content and return it together with the page
    count and document metadata. Nothing is kept server-side after the response.
    """
    if pdf is None:
        raise InvalidInputError("No PDF file uploaded")

    # Ensure correct file type
    if pdf.content_type != config.PDF_MIME_TYPE:
        raise InvalidInputError("Only PDF files are allowed")

    # Read at most one byte past the limit
    contents = await pdf.read(config.MAX_UPLOAD_BYTES + 1)
    if len(contents) > config.MAX_UPLOAD_BYTES:
        raise InvalidInputError(FILE_TOO_LARGE)

    logger.info("Processing PDF...")
    try:
        document = await run_in_threadpool(extractor.extract, contents)
    except Exception as e:
        logger.error(f"PDF processing error: {e}")
        raise ExternalServiceError("Failed to process PDF", details=str(e))

    logger.info(f"Extracted {len(document.text)} characters from PDF")
    return {
        "success": True,
        "text": document.text,
        "pages": document.page_count,
        "info": document.metadata,
    }
