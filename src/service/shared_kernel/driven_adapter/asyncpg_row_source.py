"""
asyncpg-backed row source.

One pool per running event loop, so threads that each drive their own loop
never share a connection. Pools are keyed on the loop object itself; an entry
whose loop has since closed is dropped before a new pool is registered.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

import asyncpg

from src.platform.database.asyncpg_setting import DatabaseConfig, create_asyncpg_pool
from src.platform.exception.exceptions import (
    QueryError,
    QueryTimeoutError,
    RowSourceConnectionError,
)
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_row_source import IRowSource, Row
from src.service.shared_kernel.domain.value_object.query_request import QueryRequest


_T = TypeVar('_T')

_CONNECTION_ERRORS = (
    OSError,
    asyncpg.exceptions.PostgresConnectionError,
    asyncpg.exceptions.CannotConnectNowError,
    asyncpg.exceptions.ConnectionDoesNotExistError,
    asyncpg.exceptions.TooManyConnectionsError,
)


class AsyncpgRowSource(IRowSource):
    def __init__(
        self,
        config: DatabaseConfig,
        pool_factory: Callable[[DatabaseConfig], Awaitable[asyncpg.Pool]] = create_asyncpg_pool,
    ) -> None:
        self.config = config
        self._pool_factory = pool_factory
        # id(loop) -> (loop, pool); the loop is kept so a recycled id never matches
        self._pools: Dict[int, Tuple[asyncio.AbstractEventLoop, asyncpg.Pool]] = {}

    def _pool_for(self, loop: asyncio.AbstractEventLoop) -> Optional[asyncpg.Pool]:
        entry = self._pools.get(id(loop))
        if entry is None or entry[0] is not loop:
            return None
        return entry[1]

    def _drop_closed_loops(self) -> None:
        for loop_id, (loop, _pool) in list(self._pools.items()):
            if loop.is_closed():
                # Its connections died with the loop; nothing left to await
                del self._pools[loop_id]
                Logger.base.warning(f'[RowSource] Dropped pool of closed loop {loop_id}')

    async def _get_pool(self) -> asyncpg.Pool:
        loop = asyncio.get_running_loop()
        if (pool := self._pool_for(loop)) is not None:
            return pool
        try:
            created = await self._pool_factory(self.config)
        except asyncio.TimeoutError as e:
            raise QueryTimeoutError('Timed out connecting to the box office database') from e
        except _CONNECTION_ERRORS as e:
            raise RowSourceConnectionError(
                f'Box office database unreachable: {type(e).__name__}'
            ) from e
        # Another task on this loop may have won the race while we were connecting
        if (pool := self._pool_for(loop)) is not None:
            await created.close()
            return pool
        self._drop_closed_loops()
        self._pools[id(loop)] = (loop, created)
        return created

    @asynccontextmanager
    async def _connection(self, timeout: float) -> AsyncIterator[asyncpg.Connection]:
        pool = await self._get_pool()
        try:
            conn = await pool.acquire(timeout=timeout)
        except asyncio.TimeoutError as e:
            raise QueryTimeoutError(f'No connection available within {timeout}s') from e
        except _CONNECTION_ERRORS as e:
            raise RowSourceConnectionError(
                f'Box office database unreachable: {type(e).__name__}'
            ) from e
        try:
            yield conn
        finally:
            # Released on every exit path, cancellation included
            await pool.release(conn)

    async def _run(
        self,
        request: QueryRequest,
        timeout: Optional[float],
        call: Callable[[asyncpg.Connection, float], Awaitable[_T]],
    ) -> _T:
        bound = timeout if timeout is not None else self.config.query_timeout
        async with self._connection(bound) as conn:
            try:
                return await call(conn, bound)
            except asyncio.TimeoutError as e:
                raise QueryTimeoutError(f'{request.name} exceeded {bound}s') from e
            except _CONNECTION_ERRORS as e:
                raise RowSourceConnectionError(
                    f'Connection lost during {request.name}: {type(e).__name__}'
                ) from e
            except (asyncpg.PostgresError, asyncpg.exceptions.InterfaceError) as e:
                raise QueryError(f'{request.name} failed: {type(e).__name__}: {e}') from e

    @Logger.io(truncate_content=True)
    async def fetch_all(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> List[Row]:
        records = await self._run(
            request,
            timeout,
            lambda conn, bound: conn.fetch(request.sql, *request.params, timeout=bound),
        )
        rows = [dict(record) for record in records]
        Logger.base.debug(f'[RowSource] {request.name} returned {len(rows)} rows')
        return rows

    @Logger.io(truncate_content=True)
    async def fetch_one(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> Optional[Row]:
        record = await self._run(
            request,
            timeout,
            lambda conn, bound: conn.fetchrow(request.sql, *request.params, timeout=bound),
        )
        return dict(record) if record is not None else None

    async def warmup(self) -> None:
        pool = await self._get_pool()
        Logger.base.info(
            f'[Pool Warmup] size={pool.get_size()}, idle={pool.get_idle_size()}, '
            f'max={pool.get_max_size()}'
        )


    async def close(self) -> None:
        """Close the pool bound to the current event loop."""
        loop = asyncio.get_running_loop()
        pool = self._pool_for(loop)
        if pool is not None:
            del self._pools[id(loop)]
            await pool.close()

    async def close_all(self) -> None:
        """
        Close every pool this source opened.

        Pools on the current loop are closed directly, pools on other live loops
        are closed on their own loop, and pools whose loop already closed are dropped.
        """
        current = asyncio.get_running_loop()
        entries = list(self._pools.values())
        self._pools.clear()
        failures: List[Exception] = []
        for loop, pool in entries:
            try:
                if loop is current:
                    await pool.close()
                elif not loop.is_closed():
                    future = asyncio.run_coroutine_threadsafe(pool.close(), loop)
                    await asyncio.wrap_future(future)
            except Exception as e:
                Logger.base.error(f'[RowSource] Failed to close pool: {type(e).__name__}: {e}')
                failures.append(e)
        if failures:
            raise failures[0]
