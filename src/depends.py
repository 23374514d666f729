from functools import lru_cache
from fastapi import Depends
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.identity_provider import CredentialsIdentityProvider
from src.adapter.services.page_cache import InMemoryPageCache, RedisPageCache
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.identity_provider import IdentityProvider
from src.app.services.page_cache import PageCache
from src.app.services.unit_of_work import UnitOfWork


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """SQLite leaves FOREIGN KEY constraints off unless asked per connection"""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work(session: AsyncSession = Depends(get_session)) -> UnitOfWork:
    """UnitOfWork over the same request session the repositories use"""
    return SqlAlchemyUnitOfWork(session)


@lru_cache
def get_page_cache() -> PageCache:
    """Process-wide page cache selected by CACHE_BACKEND"""
    if ApplicationConfig.CACHE_BACKEND == "redis":
        return RedisPageCache.from_url(
            ApplicationConfig.REDIS_URL,
            ttl_seconds=ApplicationConfig.PAGE_CACHE_TTL_SECONDS,
        )
    return InMemoryPageCache(ttl_seconds=ApplicationConfig.PAGE_CACHE_TTL_SECONDS)


async def get_identity_provider(
    session: AsyncSession = Depends(get_session),
) -> IdentityProvider:
    return CredentialsIdentityProvider(SqlAlchemyUserRepository(session))
