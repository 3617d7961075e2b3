import pytest

from markertrack.core.database import RepoBundle, build_repos, create_engine
from markertrack.core.database.repositories.markers import MarkerRepository, UserMarkerRepository
from markertrack.core.database.repositories.users import UserRepository
from markertrack.core.database.utils import normalize_database_url


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql+psycopg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


@pytest.mark.asyncio
async def test_create_engine_for_sqlite():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    try:
        assert engine.dialect.name == "sqlite"
        assert engine.dialect.driver == "aiosqlite"
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_build_repos_shares_session(session):
    repos = build_repos(session)

    assert isinstance(repos, RepoBundle)
    assert isinstance(repos.users, UserRepository)
    assert isinstance(repos.markers, MarkerRepository)
    assert isinstance(repos.user_markers, UserMarkerRepository)
    assert repos.users.session is repos.markers.session is repos.user_markers.session is session
