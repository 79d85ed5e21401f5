from fastapi import Depends, Request

from app.config import get_settings
from app.database import get_db
from app.services.github_client import GitHubSearchClient


def get_github_client(request: Request) -> GitHubSearchClient:
    return request.app.state.github_client


DBSession = Depends(get_db)
AppSettings = Depends(get_settings)
GitHubClient = Depends(get_github_client)
