"""
Testes da fachada Application e da seleção de backend.
"""

import pytest

from src.adapters.handlers.users import ErrorKind, HandlerError
from src.config.application import Application, Backend, build_application
from src.core.shared.in_memory import InMemoryBaseRepository
from src.core.users.dtos import CreateUserInputDTO, UpdateUserInputDTO


def john_doe(email="john@example.com"):
    return CreateUserInputDTO(
        username="john_doe",
        email=email,
        full_name="John Doe",
        age=30,
    )


class TestBackend:
    """Testes para o enum de backends."""

    def test_from_flag(self):
        assert Backend.from_flag(True) is Backend.DATABASE
        assert Backend.from_flag(False) is Backend.IN_MEMORY

    def test_from_settings(self, monkeypatch):
        from src.config import settings

        monkeypatch.setattr(settings, "USE_DATABASE", True)

        assert Backend.from_settings() is Backend.DATABASE


class TestInMemoryApplication:
    """Cenário completo sobre o backend em memória."""

    def test_monta_backend_em_memoria(self):
        app = build_application(Backend.IN_MEMORY)

        assert isinstance(app, Application)
        assert app.backend is Backend.IN_MEMORY
        base = app.handler.service.repository.base
        assert isinstance(base, InMemoryBaseRepository)

    @pytest.mark.asyncio
    async def test_cenario_john_doe(self):
        app = build_application(Backend.IN_MEMORY)

        user = await app.create_user(john_doe())
        assert (await app.find_by_id(user.id)).username == "john_doe"

        with pytest.raises(HandlerError) as exc_info:
            await app.create_user(john_doe(email="another@example.com"))
        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS

        updated = await app.update_user(user.id, UpdateUserInputDTO(age=31))
        assert updated.age == 31
        assert updated.updated_at > user.updated_at

        await app.delete_user(user.id)
        assert await app.find_by_id(user.id) is None
        assert await app.count_users() == 0

    @pytest.mark.asyncio
    async def test_aplicacoes_nao_compartilham_armazenamento(self):
        first = build_application(Backend.IN_MEMORY)
        second = build_application(Backend.IN_MEMORY)

        await first.create_user(john_doe())

        assert await first.count_users() == 1
        assert await second.count_users() == 0

    @pytest.mark.asyncio
    async def test_listagem_e_estatisticas(self):
        app = build_application(Backend.IN_MEMORY)
        await app.create_user(john_doe())

        page = await app.list_users(page=1, per_page=5)
        in_range = await app.users_by_age_range(18, 40)
        stats = await app.statistics()

        assert page.total == 1
        assert [u.username for u in in_range] == ["john_doe"]
        assert stats.average_age == 30


@pytest.mark.django_db(transaction=True)
class TestDatabaseApplication:
    """Mesmo cenário sobre o backend Django."""

    @pytest.mark.asyncio
    async def test_cenario_john_doe(self):
        from src.adapters.django_app.users.repositories import DjangoUserBaseRepository

        app = build_application(Backend.DATABASE)
        assert isinstance(app.handler.service.repository.base, DjangoUserBaseRepository)

        user = await app.create_user(john_doe())

        with pytest.raises(HandlerError) as exc_info:
            await app.create_user(john_doe(email="another@example.com"))
        assert exc_info.value.status_code == 409

        updated = await app.update_user(user.id, UpdateUserInputDTO(age=31))
        assert updated.age == 31

        await app.delete_user(user.id)
        with pytest.raises(HandlerError) as exc_info:
            await app.delete_user(user.id)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestPaginationSettings:
    """Testes da paginação configurada em settings."""

    def test_limite_vem_de_pagination(self):
        from src.config import settings
        from src.core.shared import pagination

        assert settings.MAX_PAGE_SIZE == pagination.MAX_PAGE_SIZE

    @pytest.mark.asyncio
    async def test_tamanho_padrao_da_pagina(self, monkeypatch):
        from src.config import settings

        monkeypatch.setattr(settings, "DEFAULT_PAGE_SIZE", 2)
        app = build_application(Backend.IN_MEMORY)
        for name in ("john_doe", "jane_smith", "bob_wilson"):
            await app.create_user(
                CreateUserInputDTO(
                    username=name,
                    email=f"{name}@example.com",
                    full_name=name.replace("_", " ").title(),
                )
            )

        page = await app.list_users()

        assert page.per_page == 2
        assert len(page.items) == 2
        assert page.total == 3
