import argparse
import logging

from app.config import get_settings
from app.database import SessionLocal, engine
from app.services.errors import ExternalServiceError
from app.services.github_client import GitHubSearchClient
from app.services.repositories import search_and_save
from app.services.schema import ensure_schema
from app.services.validation import InvalidArgument


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search GitHub repositories and store the results")
    parser.add_argument("--query", required=True, help="Search terms")
    parser.add_argument("--language", help="Restrict to one programming language")
    parser.add_argument("--sort", help="stars, forks, updated or name (default: stars)")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    ensure_schema(engine)

    client = GitHubSearchClient.from_settings(settings)
    try:
        with SessionLocal() as db:
            repositories = search_and_save(db, client, query=args.query, language=args.language, sort=args.sort)
    except (InvalidArgument, ExternalServiceError) as exc:
        print(f"error: {exc}")
        return 1
    finally:
        client.close()

    for repo in repositories:
        print(f"{repo.id}\t{repo.owner or '-'}/{repo.name}\tstars={repo.stars}\tforks={repo.forks}")
    print(f"Saved {len(repositories)} repositories")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
