import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from werkzeug.security import generate_password_hash

import src.domain  # noqa: F401
from src.adapter.services.page_cache import InMemoryPageCache
from src.depends import enable_sqlite_foreign_keys, get_page_cache, get_session
from src.domain.customer import Customer
from src.domain.user import User


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create an in-memory SQLite engine with the full schema"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

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
async def customer(db_session):
    customer = Customer(name="Delba de Oliveira", email="delba@oliveira.com")
    db_session.add(customer)
    await db_session.commit()
    return customer


@pytest_asyncio.fixture
async def user(db_session):
    user = User(
        name="User",
        email="user@nextmail.com",
        password=generate_password_hash("123456"),
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
def page_cache():
    return InMemoryPageCache()


@pytest_asyncio.fixture
async def client(db_session, page_cache):
    """Create test client with database session and page cache overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_page_cache] = lambda: page_cache

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
