"""Page Cache Interface

Defines the contract for caching rendered dashboard views by path.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PageCache(ABC):
    """
    Cache of rendered pages keyed by request path

    Mutations call invalidate() after their write is committed so the
    next request for the path renders fresh data.
    """

    @abstractmethod
    async def get(self, path: str) -> Optional[str]:
        """
        Return the cached rendering for a path

        Args:
            path: Request path (e.g. "/dashboard/invoices")

        Returns:
            Cached content if present and fresh, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, path: str, content: str) -> None:
        """
        Store the rendering for a path

        Args:
            path: Request path
            content: Rendered content
        """
        pass

    @abstractmethod
    async def invalidate(self, path: str) -> None:
        """
        Mark any cached rendering of a path as stale

        Args:
            path: Request path
        """
        pass
