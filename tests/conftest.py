"""
Configurações globais do Pytest para o serviço de Usuários.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas:
- Django configurado com SQLite em memória (backend de banco)
- Repositório, service e handler em memória
- Opção --run-integration
"""

import pytest

from src.adapters.handlers.users import UserHandler
from src.config.container import reset_container
from src.core.shared.in_memory import InMemoryBaseRepository
from src.core.users.dtos import CreateUserInputDTO
from src.core.users.ports import UserRepository
from src.core.users.services import UserService


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container global limpo.
    """
    yield
    reset_container()


@pytest.fixture
def in_memory_base():
    """Repositório base em memória vazio."""
    return InMemoryBaseRepository(entity_name="User")


@pytest.fixture
def user_repository(in_memory_base):
    return UserRepository(in_memory_base)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def user_handler(user_service):
    return UserHandler(user_service)


@pytest.fixture
def john_doe_dto():
    """DTO do usuário padrão dos cenários."""
    return CreateUserInputDTO(
        username="john_doe",
        email="john@example.com",
        full_name="John Doe",
        age=30,
    )


def pytest_configure(config):
    """Configuração do pytest e do Django (SQLite em memória)."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'src.adapters.django_app.users',
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='UTC',
        )
        django.setup()


def pytest_collection_modifyitems(config, items):
    """Modifica coleção de testes."""
    skip_integration = pytest.mark.skip(reason="Integration tests require --run-integration")

    for item in items:
        if "integration" in item.keywords:
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
