from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Box Office Reporting'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'box_office'
    POSTGRES_PASSWORD: SecretStr = SecretStr('box_office')
    POSTGRES_DB: str = 'box_office'

    # asyncpg pool
    ASYNCPG_POOL_MIN_SIZE: int = 2
    ASYNCPG_POOL_MAX_SIZE: int = 10
    ASYNCPG_POOL_TIMEOUT: float = 10.0  # Connect timeout (seconds)
    ASYNCPG_POOL_MAX_INACTIVE_LIFETIME: float = 300.0

    # Per-query bound (seconds); expiry surfaces as a retryable error
    ROW_SOURCE_QUERY_TIMEOUT: float = 5.0

    # Seating grid
    SEAT_GRID_ROWS: int = 5
    SEAT_GRID_COLUMNS: int = 5
    SEAT_GRID_OVERFLOW_POLICY: str = 'reject'  # 'reject' | 'expand'

    # Marketing
    BULK_BOOKING_MIN_QUANTITY: int = 12

    @field_validator('SEAT_GRID_ROWS', 'SEAT_GRID_COLUMNS', 'BULK_BOOKING_MIN_QUANTITY')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('must be >= 1')
        return v

    @field_validator('SEAT_GRID_OVERFLOW_POLICY')
    @classmethod
    def normalize_overflow_policy(cls, v: str) -> str:
        policy = v.strip().lower()
        if policy not in ('reject', 'expand'):
            raise ValueError("SEAT_GRID_OVERFLOW_POLICY must be 'reject' or 'expand'")
        return policy

    @property
    def DATABASE_DSN(self) -> str:
        return (
            f'postgresql://{self.POSTGRES_USER}@{self.POSTGRES_SERVER}:'
            f'{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )


settings = Settings()  # type: ignore
