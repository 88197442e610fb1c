import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.principal_cache import InMemoryPrincipalCache
from src.depends import get_identity_provider, get_principal_cache, get_session
from tests.fixtures.fake_identity import FakeIdentityProvider


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'invoicing_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def identity_provider():
    """Identity provider with two tenants' owners registered"""
    provider = FakeIdentityProvider()
    provider.add_account("owner@acme.in", "secret1", principal_id="tenant-a", user_metadata={"full_name": "Asha"})
    provider.add_account("owner@globex.in", "secret2", principal_id="tenant-b", user_metadata={"full_name": "Ravi"})
    return provider


@pytest_asyncio.fixture
async def principal_cache(identity_provider):
    cache = InMemoryPrincipalCache()
    identity_provider.subscribe(cache.handle_session_event)
    return cache


@pytest_asyncio.fixture
async def client(db_session, identity_provider, principal_cache):
    """Create test client with database session and auth overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    app.dependency_overrides[get_principal_cache] = lambda: principal_cache

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def _sign_in(client, email, password):
    response = await client.post("/auth/sign-in", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def tenant_a_headers(client):
    return await _sign_in(client, "owner@acme.in", "secret1")


@pytest_asyncio.fixture
async def tenant_b_headers(client):
    return await _sign_in(client, "owner@globex.in", "secret2")
