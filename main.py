from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback

import config
from errors import LearnlyError, error_body

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("learnly")

app = FastAPI(title="Learnly Backend")

# --- Fallback for anything the routes did not handle ---
@app.middleware("http")
async def log_exceptions(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        traceback.print_exc()
        logger.error(f"🔥 UNCAUGHT EXCEPTION: {e}")
        return JSONResponse(status_code=500, content=error_body(str(e)))

# === CORS Setup ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error responses: always {"error": ..., "details"?: ...} ---
@app.exception_handler(LearnlyError)
async def learnly_error_handler(request: Request, exc: LearnlyError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content=error_body("Invalid request", details))

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))

# --- Modular routers ---
from flashcard_generator import router as flashcard_router
from quiz import router as quiz_router
from summary import router as summary_router
from exam_questions import router as exam_questions_router
from upload_pdf import router as upload_pdf_router

# --- Include all routes ---
app.include_router(upload_pdf_router, prefix="/api")
app.include_router(flashcard_router, prefix="/api")
app.include_router(quiz_router, prefix="/api")
app.include_router(summary_router, prefix="/api")
app.include_router(exam_questions_router, prefix="/api")

# --- Health check ---
@app.get("/api/health")
def health_check():
    return {"message": "Learnly Backend is running!"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Learnly Backend running on port {config.PORT}")
    logger.info(f"📋 Health check: http://localhost:{config.PORT}/api/health")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
