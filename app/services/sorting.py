from collections.abc import Callable, Sequence
from typing import Any

from app.enums import SortField, SortOrder
from app.models.repository import Repository

SORT_KEYS: dict[SortField, Callable[[Repository], Any]] = {
    SortField.stars: lambda repo: repo.stars,
    SortField.forks: lambda repo: repo.forks,
    SortField.updated: lambda repo: repo.last_updated,
    SortField.name: lambda repo: repo.name,
}


def filter_by_name(repositories: Sequence[Repository], name_contains: str | None) -> list[Repository]:
    if not name_contains:
        return list(repositories)
    needle = name_contains.lower()
    return [repo for repo in repositories if repo.name is not None and needle in repo.name.lower()]


def sort_repositories(repositories: Sequence[Repository], sort_by: SortField, sort_order: SortOrder) -> list[Repository]:
    """Order by one field; rows missing that field go last whichever way the order runs.

    ``sorted`` is stable with ``reverse=True`` as well, so equal keys keep their
    incoming relative order in both directions.
    """
    key = SORT_KEYS[sort_by]
    present = [repo for repo in repositories if key(repo) is not None]
    missing = [repo for repo in repositories if key(repo) is None]
    ordered = sorted(present, key=key, reverse=sort_order is SortOrder.desc)
    return ordered + missing
