import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from score_engine.constants import (
    API_HOST,
    API_PORT,
    CORS_ALLOW_ORIGINS,
    LOG_LEVEL,
    SERVICE_NAME,
    SERVICE_VERSION,
)
from score_engine.models import (
    BodyCaptureSignals,
    FaceCaptureSignals,
    PhotoQualityAssessment,
    ScoringOutput,
    ScoringRequest,
    Variant,
)
from score_engine.scoring import (
    ScoringError,
    assess_body_photo_quality,
    assess_face_photo_quality,
    run_scoring_pipeline,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint - health check for Cloud Run."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "healthy",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


@app.post("/photo-quality/face", response_model=PhotoQualityAssessment)
async def face_photo_quality(payload: FaceCaptureSignals) -> PhotoQualityAssessment:
    """Assess a face photo from its capture signals."""
    return assess_face_photo_quality(payload)


@app.post("/photo-quality/body", response_model=PhotoQualityAssessment)
async def body_photo_quality(payload: BodyCaptureSignals) -> PhotoQualityAssessment:
    """Assess a full-body photo from its capture signals."""
    return assess_body_photo_quality(payload)


@app.post("/face/score", response_model=ScoringOutput)
async def score_face(payload: ScoringRequest) -> ScoringOutput:
    """
    Score a face from externally measured ratios.

    Returns trait, pillar and overall scores, the potential range, the top
    three levers, the harmony index and the feature breakdown.
    """
    return run_scoring_pipeline(payload, Variant.FACE)


@app.post("/body/score", response_model=ScoringOutput)
async def score_body(payload: ScoringRequest) -> ScoringOutput:
    """Score a physique from externally measured ratios."""
    return run_scoring_pipeline(payload, Variant.BODY)


@app.exception_handler(ScoringError)
async def scoring_exception_handler(request: Request, exc: ScoringError):
    """Requests that are well-formed but cannot be scored."""
    logger.warning("Scoring rejected for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "error": type(exc).__name__,
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return a concise, friendly 422 payload."""
    errors = []
    for err in exc.errors():
        location_parts = [str(part) for part in err.get("loc", []) if part != "body"]
        errors.append(
            {
                "field": "body" if not location_parts else ".".join(location_parts),
                "message": err.get("msg"),
            }
        )

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Invalid request payload",
            "errors": errors,
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("score_engine.main:app", host=API_HOST, port=API_PORT, reload=True)
