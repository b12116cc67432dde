"""
Bootstrap da aplicação.

Seleciona o backend de armazenamento uma única vez, monta o container
e expõe a fachada Application, cujos métodos despacham para o mesmo
handler independentemente do backend.

Backends:
- IN_MEMORY: dict + ReadWriteLock (nada é persistido)
- DATABASE: Django ORM (SQLite ou PostgreSQL, via DATABASE_URL)

Note:
    build_application() é síncrona e deve ser chamada fora do event
    loop: django.setup() e migrate não podem rodar em contexto async.
"""

from enum import Enum
from typing import List, Optional
import logging
import logging.config
import os

from src.adapters.handlers.users import UserHandler
from src.core.shared.pagination import PaginatedResult
from src.core.users.dtos import (
    AgeRangeQueryDTO,
    CreateUserInputDTO,
    ListUsersQueryDTO,
    UpdateUserInputDTO,
    UserOutputDTO,
    UserStatisticsDTO,
)

from .container import Container

logger = logging.getLogger(__name__)


class Backend(Enum):
    """Variantes de armazenamento (conjunto fechado)."""

    IN_MEMORY = "in_memory"
    DATABASE = "database"

    @classmethod
    def from_flag(cls, use_database: bool) -> "Backend":
        return cls.DATABASE if use_database else cls.IN_MEMORY

    @classmethod
    def from_settings(cls) -> "Backend":
        """Lê USE_DATABASE (ou USE_POSTGRES) do ambiente/.env."""
        from src.config import settings

        return cls.from_flag(settings.USE_DATABASE)


def configure_logging() -> None:
    """Aplica o LOGGING de settings (sem passar pelo Django)."""
    from src.config import settings

    logging.config.dictConfig(settings.LOGGING)


def setup_django(run_migrations: bool = False) -> None:
    """
    Inicializa o Django para o backend de banco.

    Args:
        run_migrations: Se True, executa migrate (cria a tabela users)
    """
    import django
    from django.conf import settings as django_settings

    if not django_settings.configured:
        os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    django.setup()

    if run_migrations:
        from django.core.management import call_command

        call_command('migrate', verbosity=0)
        logger.info("Database migrations applied")


class Application:
    """
    Fachada da aplicação.

    Example:
        app = build_application(Backend.IN_MEMORY)
        user = await app.create_user(CreateUserInputDTO(...))
        same = await app.find_by_id(user.id)
    """

    def __init__(self, backend: Backend, handler: UserHandler):
        self.backend = backend
        self.handler = handler

    async def create_user(self, input_dto: CreateUserInputDTO) -> UserOutputDTO:
        return await self.handler.create_user(input_dto)

    async def find_by_id(self, user_id: str) -> Optional[UserOutputDTO]:
        return await self.handler.find_by_id(user_id)

    async def get_user(self, user_id: str) -> UserOutputDTO:
        return await self.handler.get_user(user_id)

    async def find_by_username(self, username: str) -> Optional[UserOutputDTO]:
        return await self.handler.find_by_username(username)

    async def find_by_email(self, email: str) -> Optional[UserOutputDTO]:
        return await self.handler.find_by_email(email)

    async def update_user(self, user_id: str, input_dto: UpdateUserInputDTO) -> UserOutputDTO:
        return await self.handler.update_user(user_id, input_dto)

    async def delete_user(self, user_id: str) -> None:
        await self.handler.delete_user(user_id)

    async def list_users(
        self, page: int = 1, per_page: Optional[int] = None
    ) -> PaginatedResult[UserOutputDTO]:
        if per_page is None:
            from src.config import settings

            per_page = settings.DEFAULT_PAGE_SIZE
        return await self.handler.list_users(ListUsersQueryDTO(page=page, per_page=per_page))

    async def users_by_age_range(self, min_age: int, max_age: int) -> List[UserOutputDTO]:
        return await self.handler.get_users_by_age_range(
            AgeRangeQueryDTO(min_age=min_age, max_age=max_age)
        )

    async def count_users(self) -> int:
        return await self.handler.count_users()

    async def statistics(self) -> UserStatisticsDTO:
        return await self.handler.get_statistics()


def build_application(
    backend: Optional[Backend] = None,
    run_migrations: bool = False,
    container: Optional[Container] = None,
) -> Application:
    """
    Monta a aplicação com o backend escolhido.

    Args:
        backend: Backend desejado (default: USE_DATABASE do ambiente)
        run_migrations: Executa migrate no backend de banco
        container: Container pré-configurado (default: novo container)

    Returns:
        Application pronta para uso
    """
    if backend is None:
        backend = Backend.from_settings()

    if backend is Backend.DATABASE:
        # Django aplica settings.LOGGING no setup
        setup_django(run_migrations=run_migrations)
    else:
        configure_logging()

    if container is None:
        container = Container()
    container.config.backend.from_value(backend.value)

    logger.info(f"Application started with {backend.value} backend")
    return Application(backend=backend, handler=container.user_handler())
