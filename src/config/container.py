"""
Dependency Injection Container.

Configura e gerencia as dependências do serviço de Usuários.
Usa dependency-injector para lazy-loading e seleção do backend.

Padrões:
- Selector: Escolhe o repositório base pelo valor de config.backend
- Singleton: Uma instância por container (repositórios, service)
- Factory: Nova instância por chamada (handlers)

O backend de banco é importado tardiamente: o ORM só é carregado
quando config.backend == "database" (após django.setup()).
"""

from dependency_injector import containers, providers
from typing import Optional

from src.adapters.handlers.users import UserHandler
from src.core.shared.in_memory import InMemoryBaseRepository
from src.core.users.ports import UserRepository
from src.core.users.services import UserService


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: backend ("in_memory" ou "database")
    - Repositories: base (selecionado) + domínio
    - Services: Casos de uso
    - Handlers: Tradução para o chamador

    Example:
        container = Container()
        container.config.backend.from_value("in_memory")

        handler = container.user_handler()
        output = await handler.create_user(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por container)
    # =========================================================================

    user_base_repository = providers.Selector(
        config.backend,
        in_memory=providers.Singleton(
            InMemoryBaseRepository,
            entity_name="User",
        ),
        database=providers.Singleton(
            # Lazy import
            lambda: __import__(
                'src.adapters.django_app.users.repositories',
                fromlist=['build_user_base_repository']
            ).build_user_base_repository()
        ),
    )

    user_repository = providers.Singleton(
        UserRepository,
        base=user_base_repository,
    )

    # =========================================================================
    # Services
    # =========================================================================

    user_service = providers.Singleton(
        UserService,
        repository=user_repository,
    )

    # =========================================================================
    # Handlers (Factory - nova instância por chamada)
    # =========================================================================

    user_handler = providers.Factory(
        UserHandler,
        service=user_service,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container(backend: str = "in_memory") -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization). O backend só é
    aplicado na criação.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.backend.from_value(backend)

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None
