from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from app.models.repository import Repository

logger = logging.getLogger(__name__)

Count = Annotated[StrictInt, Field(ge=0)]


class GitHubOwner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: StrictStr | None = None


class GitHubSearchItem(BaseModel):
    """One entry of the ``items`` array returned by ``/search/repositories``."""

    model_config = ConfigDict(extra="ignore")

    id: StrictInt
    name: StrictStr
    description: StrictStr | None = None
    owner: GitHubOwner | None = None
    language: StrictStr | None = None
    stargazers_count: Count | None = None
    forks_count: Count | None = None
    updated_at: datetime | None = None

    @field_validator("updated_at", mode="before")
    @classmethod
    def parse_timestamp(cls, value: Any) -> datetime | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("updated_at must be an ISO-8601 string")
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            raise ValueError("updated_at must carry a timezone offset")
        return parsed.astimezone(UTC)


def map_repository(item: Any) -> Repository | None:
    try:
        parsed = GitHubSearchItem.model_validate(item)
    except ValidationError as exc:
        item_id = item.get("id") if isinstance(item, dict) else None
        logger.warning("Skipping unmappable repository item id=%s: %s", item_id, exc.errors(include_url=False))
        return None

    return Repository(
        id=parsed.id,
        name=parsed.name,
        description=parsed.description,
        owner=parsed.owner.login if parsed.owner is not None else None,
        language=parsed.language,
        stars=parsed.stargazers_count or 0,
        forks=parsed.forks_count or 0,
        last_updated=parsed.updated_at,
    )


def map_repositories(items: Iterable[Any]) -> list[Repository]:
    mapped: list[Repository] = []
    for item in items:
        record = map_repository(item)
        if record is not None:
            mapped.append(record)
    return mapped
