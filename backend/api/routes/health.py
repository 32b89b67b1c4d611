"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.store import DocumentStore

from ..dependencies import get_document_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return "Welcome to BMS-hub Apartment Server!"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(store: DocumentStore = Depends(get_document_store)):
    """
    Readiness check endpoint.

    Returns 503 if the document store does not answer.
    """
    if store.ping():
        return ReadinessResponse(status="ready", database="connected")
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="unavailable", database="unreachable").model_dump(),
    )
