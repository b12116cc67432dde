"""
Fixtures para testes do backend Django.

Django já é configurado (SQLite em memória) pelo conftest raiz;
o banco de teste é criado pelo pytest-django a partir das migrations.
"""

import pytest


@pytest.fixture
def django_base_repository():
    """Repositório base Django de usuários."""
    from src.adapters.django_app.users.repositories import DjangoUserBaseRepository
    return DjangoUserBaseRepository()


@pytest.fixture
def django_user_service(django_base_repository):
    """UserService sobre o backend Django."""
    from src.core.users.ports import UserRepository
    from src.core.users.services import UserService
    return UserService(UserRepository(django_base_repository))


@pytest.fixture
def sample_user_entity():
    """Cria entidade de usuário para testes."""
    from src.core.users.entities import UserEntity

    return UserEntity.create(
        username="john_doe",
        email="john@example.com",
        full_name="John Doe",
        age=30,
    )
