import uuid

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fraudshield_ai import __version__
from fraudshield_ai.config import settings
from fraudshield_ai.schemas.analyze_schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CallSimulationResponse,
    DemoMessageResponse,
)
from fraudshield_ai.pipelines.text_pipeline import analyze_text
from fraudshield_ai.services.demo_service import (
    caller_transcript,
    get_call_simulation,
    get_demo_message,
    resolve_kind,
)
from fraudshield_ai.services.scoring_engine import scoring_engine
from fraudshield_ai.api.security import verify_api_token, check_rate_limit
from fraudshield_ai.api.admin import router as admin_router
from fraudshield_ai.utils.logging_config import StructuredLogger, init_logging, request_id_var

# Initialize structured logging
init_logging()

logger = StructuredLogger(__name__)

app = FastAPI(
    title="FraudShield AI",
    version=__version__,
    description="Heuristic fraud scoring for SMS, chat and call transcripts",
    docs_url="/docs" if settings.debug else None,  # Disable docs in production
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    if settings.is_production:
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response


# Request id middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-ID"] = request_id
    return response


# Rate limit headers middleware
@app.middleware("http")
async def add_rate_limit_headers(request: Request, call_next):
    response = await call_next(request)
    if hasattr(request.state, "rate_limit_remaining"):
        response.headers["X-RateLimit-Limit"] = str(request.state.rate_limit_limit)
        response.headers["X-RateLimit-Remaining"] = str(request.state.rate_limit_remaining)
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Generic 500 without leaking internals."""
    logger.error(
        "Unhandled error",
        exc_info=True,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(admin_router)


@app.get("/health")
def health():
    """Health check endpoint - no auth required."""
    return {"status": "ok"}


@app.get("/status")
def status_info():
    """API status and configuration info."""
    return {
        "status": "ok",
        "version": __version__,
        "environment": settings.environment,
        "auth_enabled": bool(settings.api_token),
        "rate_limit": {
            "requests": settings.rate_limit_requests,
            "window_seconds": settings.rate_limit_window,
        },
        "categories": list(scoring_engine.config.category_names()),
    }


@app.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    dependencies=[Depends(verify_api_token), Depends(check_rate_limit)],
)
def analyze(body: AnalyzeRequest):
    message = body.content()
    if message is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Field 'message' is required.",
        )

    return AnalyzeResponse(**analyze_text(message))


@app.get(
    "/api/demo/{kind}",
    response_model=DemoMessageResponse,
    dependencies=[Depends(verify_api_token)],
)
def demo_message(kind: str):
    """Canned sample message. Unknown kinds return the safe sample."""
    resolved = resolve_kind(kind)
    return DemoMessageResponse(kind=resolved, message=get_demo_message(resolved))


@app.get(
    "/api/simulation/{kind}",
    response_model=CallSimulationResponse,
    dependencies=[Depends(verify_api_token), Depends(check_rate_limit)],
)
def call_simulation(kind: str):
    """Scripted call plus the score of everything the caller said."""
    resolved = resolve_kind(kind)
    simulation = get_call_simulation(resolved)
    analysis = analyze_text(caller_transcript(resolved))
    return CallSimulationResponse(
        kind=resolved,
        caller=simulation["caller"],
        steps=simulation["steps"],
        analysis=AnalyzeResponse(**analysis),
    )
