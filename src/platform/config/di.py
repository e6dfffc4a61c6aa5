"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.hotel.app.service.hotel_access_service import HotelAccessService
from src.service.hotel.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel.driven_adapter.repo.hotel_query_repo_impl import HotelQueryRepoImpl
from src.service.hotel.driven_adapter.repo.session_query_repo_impl import SessionQueryRepoImpl
from src.service.hotel.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (every hotel query is a read, so the replica is preferred when configured)
    read_database = providers.Singleton(Database, read_only=True)

    # Repositories (stateless - use session_factory per-request)
    hotel_query_repo = providers.Singleton(
        HotelQueryRepoImpl, session_factory=read_database.provided.session
    )
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=read_database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=read_database.provided.session
    )
    session_query_repo = providers.Singleton(
        SessionQueryRepoImpl, session_factory=read_database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # Enrollment -> ticket -> payment gate, shared by the hotel use cases
    hotel_access_service = providers.Singleton(
        HotelAccessService,
        enrollment_query_repo=enrollment_query_repo,
        ticket_query_repo=ticket_query_repo,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
