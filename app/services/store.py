import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.repository import Repository

logger = logging.getLogger(__name__)


def upsert_repository(db: Session, record: Repository) -> Repository:
    """Insert ``record`` or overwrite every column of the row sharing its id."""
    persistent = db.merge(record)
    db.flush()
    return persistent


def upsert_repositories(db: Session, records: Iterable[Repository]) -> int:
    count = 0
    for record in records:
        upsert_repository(db, record)
        count += 1
    return count


def find_repositories(
    db: Session,
    *,
    language: str | None = None,
    min_stars: int | None = None,
    min_forks: int | None = None,
) -> list[Repository]:
    stmt = select(Repository)
    if language:
        stmt = stmt.where(Repository.language == language)
    if min_stars is not None:
        stmt = stmt.where(Repository.stars >= min_stars)
    if min_forks is not None:
        stmt = stmt.where(Repository.forks >= min_forks)
    rows = list(db.scalars(stmt.order_by(Repository.id.asc())))
    logger.debug(
        "Store query language=%s min_stars=%s min_forks=%s returned %d rows",
        language,
        min_stars,
        min_forks,
        len(rows),
    )
    return rows


def count_repositories(db: Session) -> int:
    return int(db.scalar(select(func.count()).select_from(Repository)) or 0)
