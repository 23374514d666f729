from .unit_of_work import UnitOfWork
from .page_cache import PageCache
from .identity_provider import IdentityProvider, AuthError, AuthErrorType

__all__ = [
    "UnitOfWork",
    "PageCache",
    "IdentityProvider",
    "AuthError",
    "AuthErrorType",
]
