"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.asyncpg_setting import DatabaseConfig
from src.service.box_office.domain.aggregate.seat_configuration import GridShape
from src.service.box_office.domain.enum.grid_overflow_policy import GridOverflowPolicy
from src.service.box_office.driven_adapter.repo.box_office_query_repo_impl import (
    BoxOfficeQueryRepoImpl,
)
from src.service.marketing.driven_adapter.repo.marketing_query_repo_impl import (
    MarketingQueryRepoImpl,
)
from src.service.shared_kernel.driven_adapter.asyncpg_row_source import AsyncpgRowSource


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    database_config = providers.Singleton(DatabaseConfig.from_settings, settings=config_service)

    # Row source (one asyncpg pool per event loop, built from database_config)
    row_source = providers.Singleton(AsyncpgRowSource, config=database_config)

    # Repositories (stateless - connection scoped per call)
    box_office_query_repo = providers.Singleton(BoxOfficeQueryRepoImpl, row_source=row_source)
    marketing_query_repo = providers.Singleton(MarketingQueryRepoImpl, row_source=row_source)

    # Seating grid
    seat_grid_shape = providers.Singleton(
        GridShape,
        rows=config_service.provided.SEAT_GRID_ROWS,
        columns=config_service.provided.SEAT_GRID_COLUMNS,
    )
    grid_overflow_policy = providers.Singleton(
        GridOverflowPolicy, config_service.provided.SEAT_GRID_OVERFLOW_POLICY
    )

    # Marketing
    bulk_booking_min_quantity = providers.Callable(
        lambda settings: settings.BULK_BOOKING_MIN_QUANTITY, config_service
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
