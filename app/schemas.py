from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    query: str | None = None
    language: str | None = None
    sort: str | None = None


class RepositoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    owner: str | None = None
    language: str | None = None
    stars: int = 0
    forks: int = 0
    last_updated: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("last_updated", "lastUpdated"),
        serialization_alias="lastUpdated",
    )


class SearchResponse(BaseModel):
    message: str
    repositories: list[RepositoryOut]


class RepositoriesResponse(BaseModel):
    repositories: list[RepositoryOut]


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime


class HealthDetailsResponse(BaseModel):
    status: Literal["ok"]
    timestamp: datetime
    database_ok: bool
    repository_count: int
    github_api_base_url: str
    github_authenticated: bool
