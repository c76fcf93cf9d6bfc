import pytest
from pydantic import ValidationError

from src.platform.config.core_setting import Settings
from src.platform.database.asyncpg_setting import DatabaseConfig


class TestSettings:
    def test_overflow_policy_is_normalized(self):
        settings = Settings(SEAT_GRID_OVERFLOW_POLICY=' Expand ')

        assert settings.SEAT_GRID_OVERFLOW_POLICY == 'expand'

    def test_unknown_overflow_policy_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(SEAT_GRID_OVERFLOW_POLICY='wrap')

    @pytest.mark.parametrize(
        'field', ['SEAT_GRID_ROWS', 'SEAT_GRID_COLUMNS', 'BULK_BOOKING_MIN_QUANTITY']
    )
    def test_sizes_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_cors_origins_from_comma_string(self):
        settings = Settings(BACKEND_CORS_ORIGINS='http://a.test, http://b.test')

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']


class TestDatabaseConfig:
    def test_built_from_settings_without_leaking_password(self):
        settings = Settings(
            POSTGRES_USER='reporter',
            POSTGRES_PASSWORD='s3cret',
            POSTGRES_SERVER='db.internal',
            POSTGRES_DB='box_office',
            ROW_SOURCE_QUERY_TIMEOUT=2.5,
        )

        config = DatabaseConfig.from_settings(settings)

        assert config.dsn == 'postgresql://reporter@db.internal:5432/box_office'
        assert config.password == 's3cret'
        assert config.query_timeout == 2.5
        assert 's3cret' not in repr(config)
        assert 's3cret' not in config.dsn
