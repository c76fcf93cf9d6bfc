from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.service.shared_kernel.domain.value_object.query_request import QueryRequest


Row = Dict[str, Any]


class IRowSource(ABC):
    """Executes a parameterized read and returns fully materialized rows."""

    @abstractmethod
    async def fetch_all(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> List[Row]:
        """Return every row in source order.

        Raises:
            RowSourceConnectionError: The store is unreachable.
            QueryTimeoutError: The call exceeded `timeout` seconds.
            QueryError: The store rejected the request.
        """
        pass

    @abstractmethod
    async def fetch_one(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> Optional[Row]:
        """Return the first row, or None when nothing matches."""
        pass

    async def warmup(self) -> None:
        """Open connections ahead of the first request. No-op by default."""
        return None

    async def close(self) -> None:
        return None

    async def close_all(self) -> None:
        """Release connections opened on every event loop, not only the current one."""
        await self.close()
