from datetime import UTC, datetime

from sqlalchemy import func, select

from app.models.repository import Repository
from app.services.store import count_repositories, find_repositories, upsert_repositories, upsert_repository
from tests.helpers import make_repository


def test_upsert_same_id_keeps_one_row_with_latest_values(db_session):
    upsert_repository(db_session, make_repository(101, "raft", stars=5, description="first"))
    db_session.commit()
    upsert_repository(db_session, make_repository(101, "raft", stars=99, description=None))
    db_session.commit()

    db_session.expire_all()
    assert db_session.scalar(select(func.count()).select_from(Repository)) == 1
    stored = db_session.get(Repository, 101)
    assert stored.stars == 99
    assert stored.description is None


def test_timestamps_round_trip_as_utc(db_session):
    upsert_repository(db_session, make_repository(5, "clock", last_updated=datetime(2024, 2, 3, 4, 5, tzinfo=UTC)))
    db_session.commit()
    db_session.expire_all()
    stored = db_session.get(Repository, 5)
    assert stored.last_updated == datetime(2024, 2, 3, 4, 5, tzinfo=UTC)
    assert stored.last_updated.tzinfo is not None


def _seed(db_session):
    upsert_repositories(
        db_session,
        [
            make_repository(1, "a", language="Go", stars=10, forks=1),
            make_repository(2, "b", language="Go", stars=100, forks=20),
            make_repository(3, "c", language="Rust", stars=100, forks=5),
            make_repository(4, "d", language=None, stars=0, forks=0),
        ],
    )
    db_session.commit()


def test_find_without_filters_returns_everything(db_session):
    _seed(db_session)
    assert {repo.id for repo in find_repositories(db_session)} == {1, 2, 3, 4}
    assert count_repositories(db_session) == 4


def test_find_filters_language_exactly(db_session):
    _seed(db_session)
    assert {repo.id for repo in find_repositories(db_session, language="Go")} == {1, 2}
    assert find_repositories(db_session, language="go") == []


def test_find_thresholds_are_inclusive(db_session):
    _seed(db_session)
    assert {repo.id for repo in find_repositories(db_session, min_stars=100)} == {2, 3}
    assert {repo.id for repo in find_repositories(db_session, min_forks=5)} == {2, 3}
    assert {repo.id for repo in find_repositories(db_session, language="Go", min_stars=10, min_forks=20)} == {2}


def test_zero_threshold_is_not_treated_as_absent(db_session):
    _seed(db_session)
    assert len(find_repositories(db_session, min_stars=0, min_forks=0)) == 4
