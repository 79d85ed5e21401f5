from datetime import UTC, datetime

from fastapi import APIRouter
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.deps import AppSettings, DBSession
from app.config import Settings
from app.schemas import HealthDetailsResponse, HealthResponse
from app.services.store import count_repositories

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(UTC))


@router.get("/health/details", response_model=HealthDetailsResponse)
def health_details(db: Session = DBSession, settings: Settings = AppSettings) -> HealthDetailsResponse:
    db.execute(select(1))
    return HealthDetailsResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        database_ok=True,
        repository_count=count_repositories(db),
        github_api_base_url=settings.github_api_base_url,
        github_authenticated=bool(settings.github_api_token.strip()),
    )
