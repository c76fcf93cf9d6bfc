from typing import Self

import asyncpg
import attrs

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger


@attrs.frozen
class DatabaseConfig:
    """Connection settings for one row source. Passed explicitly, never read from globals."""

    dsn: str
    password: str = attrs.field(repr=False, default='')
    min_size: int = 2
    max_size: int = 10
    connect_timeout: float = 10.0
    max_inactive_connection_lifetime: float = 300.0
    query_timeout: float = 5.0

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            dsn=settings.DATABASE_DSN,
            password=settings.POSTGRES_PASSWORD.get_secret_value(),
            min_size=settings.ASYNCPG_POOL_MIN_SIZE,
            max_size=settings.ASYNCPG_POOL_MAX_SIZE,
            connect_timeout=settings.ASYNCPG_POOL_TIMEOUT,
            max_inactive_connection_lifetime=settings.ASYNCPG_POOL_MAX_INACTIVE_LIFETIME,
            query_timeout=settings.ROW_SOURCE_QUERY_TIMEOUT,
        )


async def create_asyncpg_pool(config: DatabaseConfig) -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        config.dsn,
        password=config.password or None,
        min_size=config.min_size,
        max_size=config.max_size,
        timeout=config.connect_timeout,
        command_timeout=config.query_timeout,
        max_inactive_connection_lifetime=config.max_inactive_connection_lifetime,
    )
    Logger.base.info(
        f'[Pool] Created asyncpg pool (min={config.min_size}, max={config.max_size})'
    )
    return pool
