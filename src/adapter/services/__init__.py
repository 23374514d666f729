from .unit_of_work import SqlAlchemyUnitOfWork
from .page_cache import InMemoryPageCache, RedisPageCache
from .identity_provider import CredentialsIdentityProvider

__all__ = [
    "SqlAlchemyUnitOfWork",
    "InMemoryPageCache",
    "RedisPageCache",
    "CredentialsIdentityProvider",
]
