from datetime import UTC, datetime
from typing import Any

import httpx

from app.models.repository import Repository


def make_item(repo_id: Any = 1, name: str = "raft", **overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "id": repo_id,
        "name": name,
        "full_name": f"octo/{name}",
        "description": f"{name} description",
        "owner": {"login": "octo", "type": "User"},
        "language": "Go",
        "stargazers_count": 10,
        "forks_count": 2,
        "updated_at": "2024-05-01T12:00:00Z",
    }
    item.update(overrides)
    return item


def make_repository(repo_id: int, name: str = "repo", **fields: Any) -> Repository:
    values: dict[str, Any] = {
        "description": None,
        "owner": "octo",
        "language": "Python",
        "stars": 0,
        "forks": 0,
        "last_updated": datetime(2024, 1, 1, tzinfo=UTC),
    }
    values.update(fields)
    return Repository(id=repo_id, name=name, **values)


class GitHubStub:
    """Scripted stand-in for the GitHub search endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"total_count": 0, "items": []}
        self.content: bytes | None = None
        self.error: Exception | None = None

    def respond_with(self, *items: dict[str, Any]) -> None:
        self.payload = {"total_count": len(items), "incomplete_results": False, "items": list(items)}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]
