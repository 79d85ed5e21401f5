import logging

from fastapi import APIRouter, Query
from sqlalchemy.orm import Session

from app.api.deps import DBSession, GitHubClient
from app.schemas import RepositoriesResponse, RepositoryOut, SearchRequest, SearchResponse
from app.services.github_client import GitHubSearchClient
from app.services.repositories import query_repositories, search_and_save
from app.services.validation import parse_optional_int

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/github", tags=["github"])


@router.post("/search", response_model=SearchResponse)
def search(
    body: SearchRequest,
    db: Session = DBSession,
    client: GitHubSearchClient = GitHubClient,
) -> SearchResponse:
    logger.info("Searching repositories with query: %s, language: %s, sort: %s", body.query, body.language, body.sort)
    repositories = search_and_save(db, client, query=body.query, language=body.language, sort=body.sort)
    return SearchResponse(
        message="Repositories fetched and saved successfully",
        repositories=[RepositoryOut.model_validate(repo) for repo in repositories],
    )


@router.get("/repositories", response_model=RepositoriesResponse)
def list_repositories(
    language: str | None = Query(default=None),
    min_stars: str | None = Query(default=None, alias="minStars"),
    min_forks: str | None = Query(default=None, alias="minForks"),
    name: str | None = Query(default=None),
    sort_by: str = Query(default="stars", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
    db: Session = DBSession,
) -> RepositoriesResponse:
    logger.info(
        "Getting repositories with filters - language: %s, minStars: %s, minForks: %s, name: %s, sortBy: %s, sortOrder: %s",
        language,
        min_stars,
        min_forks,
        name,
        sort_by,
        sort_order,
    )
    repositories = query_repositories(
        db,
        language=language,
        min_stars=parse_optional_int(min_stars, "minStars"),
        min_forks=parse_optional_int(min_forks, "minForks"),
        name_contains=name,
        sort_by=sort_by.strip() or "stars",
        sort_order=sort_order.strip() or "desc",
    )
    return RepositoriesResponse(repositories=[RepositoryOut.model_validate(repo) for repo in repositories])
