import logging
import re

from sqlalchemy.orm import Session

from app.models.repository import Repository
from app.services.github_client import GitHubSearchClient
from app.services.mapper import map_repositories
from app.services.sorting import filter_by_name, sort_repositories
from app.services.store import find_repositories, upsert_repositories
from app.services.validation import (
    parse_sort_field,
    parse_sort_order,
    validate_search_query,
    validate_threshold,
)

logger = logging.getLogger(__name__)

SEARCH_ORDER = "desc"
SEARCH_PAGE_SIZE = 30


def build_search_query(query: str | None, language: str | None) -> str:
    parts: list[str] = []
    if query:
        parts.append(query)
    if language:
        parts.append(f"language:{language}")
    return re.sub(r"\s", "+", " ".join(parts))


def search_and_save(
    db: Session,
    client: GitHubSearchClient,
    *,
    query: str | None,
    language: str | None = None,
    sort: str | None = None,
) -> list[Repository]:
    query = validate_search_query(query)
    sort_field = parse_sort_field(sort)

    built_query = build_search_query(query, language)
    logger.info("Searching GitHub q=%s sort=%s", built_query, sort_field.value)
    items = client.search(built_query, sort_field.value, order=SEARCH_ORDER, per_page=SEARCH_PAGE_SIZE)
    if not items:
        logger.info("No repositories found for query: %s", built_query)
        return []

    repositories = map_repositories(items)
    dropped = len(items) - len(repositories)
    if dropped:
        logger.warning("Dropped %d of %d search items that could not be mapped", dropped, len(items))

    try:
        upsert_repositories(db, repositories)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Successfully saved %d repositories", len(repositories))
    return repositories


def query_repositories(
    db: Session,
    *,
    language: str | None = None,
    min_stars: int | None = None,
    min_forks: int | None = None,
    name_contains: str | None = None,
    sort_by: str | None = "stars",
    sort_order: str | None = "desc",
) -> list[Repository]:
    validate_threshold(min_stars, "stars")
    validate_threshold(min_forks, "forks")
    sort_field = parse_sort_field(sort_by)
    order = parse_sort_order(sort_order)

    rows = find_repositories(db, language=language, min_stars=min_stars, min_forks=min_forks)
    rows = filter_by_name(rows, name_contains)
    ordered = sort_repositories(rows, sort_field, order)
    logger.info("Retrieved %d repositories with filters", len(ordered))
    return ordered
