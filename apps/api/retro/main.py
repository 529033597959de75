import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from retro.core.config import settings
from retro.core.errors import InvalidStateError, RetroError
from retro.routers import (
    assessments,
    conclusions,
    decisions,
    health,
    meta_conclusions,
    responsibilities,
    status,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Decision Retrospective API",
    version="1.0.0",
    description="Two-party retrospective on shared financial decisions.",
    root_path=settings.root_path,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RetroError)
async def handle_retro_error(request: Request, exc: RetroError) -> JSONResponse:
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    body: dict = {"detail": exc.message}
    if isinstance(exc, InvalidStateError) and exc.reasons:
        body["reasons"] = exc.reasons
    return JSONResponse(status_code=exc.status_code, content=body)


app.include_router(health.router)
app.include_router(decisions.router)
app.include_router(assessments.router)
app.include_router(responsibilities.router)
app.include_router(conclusions.router)
app.include_router(meta_conclusions.router)
app.include_router(status.router)
