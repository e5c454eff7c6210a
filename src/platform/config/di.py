"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.service.inventory.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.registration.driven_adapter.repo.attendee_command_repo_impl import (
    AttendeeCommandRepoImpl,
)
from src.service.registration.driven_adapter.repo.attendee_query_repo_impl import (
    AttendeeQueryRepoImpl,
)
from src.service.shared_kernel.driven_adapter.repo.event_catalog_impl import EventCatalogImpl
from src.service.shared_kernel.driven_adapter.repo.user_directory_impl import UserDirectoryImpl
from src.service.shared_kernel.driving_adapter.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, engine is bound lazily to the running loop)
    database = providers.Singleton(Database)

    # Collaborators owned by other parts of the platform (read-only here)
    user_directory = providers.Singleton(
        UserDirectoryImpl, session_factory=database.provided.session
    )
    event_catalog = providers.Singleton(
        EventCatalogImpl, session_factory=database.provided.session
    )

    # Inventory repositories (stateless - use session_factory per-operation)
    ticket_command_repo = providers.Singleton(
        TicketCommandRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )

    # Registration repositories
    attendee_command_repo = providers.Singleton(
        AttendeeCommandRepoImpl, session_factory=database.provided.session
    )
    attendee_query_repo = providers.Singleton(
        AttendeeQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
