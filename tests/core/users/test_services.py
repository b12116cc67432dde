"""
Testes Unitários para UserService.

Estratégia de Teste:
- Usa InMemoryBaseRepository real (sem mocks) para isolamento
- Testa cenários de sucesso e erro
- Inclui o cenário completo john_doe (criar → duplicar → atualizar → remover)
"""

import pytest
from unittest.mock import AsyncMock

from src.core.shared.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.pagination import PaginationParams
from src.core.users.dtos import CreateUserInputDTO, UpdateUserInputDTO
from src.core.users.ports import UserRepository
from src.core.users.services import UserService


def dto(username: str, email: str = None, age=None) -> CreateUserInputDTO:
    return CreateUserInputDTO(
        username=username,
        email=email or f"{username}@example.com",
        full_name=username.replace("_", " ").title(),
        age=age,
    )


class TestCreateUser:
    """Testes para create_user."""

    @pytest.mark.asyncio
    async def test_criar_usuario_sucesso(self, user_service, john_doe_dto):
        user = await user_service.create_user(john_doe_dto)

        assert user.username == "john_doe"
        assert user.created_at == user.updated_at
        assert await user_service.count_users() == 1

    @pytest.mark.asyncio
    async def test_username_duplicado_erro(self, user_service, john_doe_dto):
        """Segundo usuário com mesmo username falha."""
        await user_service.create_user(john_doe_dto)

        with pytest.raises(EntityAlreadyExistsError) as exc_info:
            await user_service.create_user(dto("john_doe", "another@example.com"))

        assert exc_info.value.field == "username"
        assert await user_service.count_users() == 1

    @pytest.mark.asyncio
    async def test_email_duplicado_erro(self, user_service, john_doe_dto):
        await user_service.create_user(john_doe_dto)

        with pytest.raises(EntityAlreadyExistsError) as exc_info:
            await user_service.create_user(dto("another_john", "john@example.com"))

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_dados_invalidos_nao_consultam_repositorio(self):
        """Validação ocorre antes de qualquer acesso ao repositório."""
        repository = AsyncMock(spec=UserRepository)
        service = UserService(repository)

        with pytest.raises(ValidationError):
            await service.create_user(dto("john_doe", "invalid-email"))

        repository.find_by_username.assert_not_called()
        repository.create.assert_not_called()


class TestGetAndFind:
    """Testes para buscas."""

    @pytest.mark.asyncio
    async def test_get_user_inexistente_erro(self, user_service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await user_service.get_user("nao-existe")

        assert exc_info.value.entity_type == "User"

    @pytest.mark.asyncio
    async def test_find_by_id_inexistente_none(self, user_service):
        assert await user_service.find_by_id("nao-existe") is None

    @pytest.mark.asyncio
    async def test_find_by_username_e_email(self, user_service, john_doe_dto):
        user = await user_service.create_user(john_doe_dto)

        assert (await user_service.find_by_username("john_doe")).id == user.id
        assert (await user_service.find_by_email("john@example.com")).id == user.id
        assert await user_service.find_by_username("ninguem") is None


class TestUpdateUser:
    """Testes para update_user."""

    @pytest.mark.asyncio
    async def test_atualizar_idade(self, user_service, john_doe_dto):
        user = await user_service.create_user(john_doe_dto)

        updated = await user_service.update_user(user.id, UpdateUserInputDTO(age=31))

        assert updated.age == 31
        assert updated.full_name == "John Doe"
        assert updated.updated_at > user.updated_at

    @pytest.mark.asyncio
    async def test_atualizar_para_username_existente_erro(self, user_service, john_doe_dto):
        await user_service.create_user(john_doe_dto)
        jane = await user_service.create_user(dto("jane_smith"))

        with pytest.raises(EntityAlreadyExistsError):
            await user_service.update_user(jane.id, UpdateUserInputDTO(username="john_doe"))

    @pytest.mark.asyncio
    async def test_atualizar_mantendo_proprio_username(self, user_service, john_doe_dto):
        """Informar o mesmo username não conta como duplicidade."""
        user = await user_service.create_user(john_doe_dto)

        updated = await user_service.update_user(
            user.id,
            UpdateUserInputDTO(username="john_doe", email="john@example.com"),
        )

        assert updated.username == "john_doe"

    @pytest.mark.asyncio
    async def test_atualizar_inexistente_erro(self, user_service):
        with pytest.raises(EntityNotFoundError):
            await user_service.update_user("nao-existe", UpdateUserInputDTO(age=20))


class TestDeleteUser:
    """Testes para delete_user."""

    @pytest.mark.asyncio
    async def test_remover_duas_vezes_erro(self, user_service, john_doe_dto):
        user = await user_service.create_user(john_doe_dto)

        await user_service.delete_user(user.id)

        with pytest.raises(EntityNotFoundError):
            await user_service.delete_user(user.id)


class TestListAndStatistics:
    """Testes para listagem, faixa de idade e estatísticas."""

    @pytest.mark.asyncio
    async def test_paginas_disjuntas(self, user_service):
        for i in range(7):
            await user_service.create_user(dto(f"user_{i}"))

        first = await user_service.list_users(PaginationParams(page=1, per_page=3))
        second = await user_service.list_users(PaginationParams(page=2, per_page=3))

        assert {u.id for u in first.items}.isdisjoint({u.id for u in second.items})
        assert first.total == 7

    @pytest.mark.asyncio
    async def test_faixa_de_idade(self, user_service):
        await user_service.create_user(dto("john_doe", age=30))
        await user_service.create_user(dto("jane_smith", age=25))
        await user_service.create_user(dto("bob_wilson"))
        await user_service.create_user(dto("old_timer", age=70))

        users = await user_service.get_users_by_age_range(25, 32)

        assert {u.username for u in users} == {"john_doe", "jane_smith"}

    @pytest.mark.asyncio
    async def test_faixa_de_idade_invertida_erro(self, user_service):
        with pytest.raises(ValidationError):
            await user_service.get_users_by_age_range(40, 20)

    @pytest.mark.asyncio
    async def test_estatisticas(self, user_service):
        await user_service.create_user(dto("john_doe", age=30))
        await user_service.create_user(dto("jane_smith", age=25))
        await user_service.create_user(dto("bob_wilson"))

        stats = await user_service.get_statistics()

        assert stats.total_users == 3
        assert stats.users_with_age == 2
        assert stats.average_age == pytest.approx(27.5)

    @pytest.mark.asyncio
    async def test_estatisticas_sem_idades(self, user_service):
        stats = await user_service.get_statistics()

        assert stats.total_users == 0
        assert stats.average_age is None


class TestFullScenario:
    """Cenário completo do usuário john_doe."""

    @pytest.mark.asyncio
    async def test_ciclo_de_vida_completo(self, john_doe_dto):
        from src.core.shared.in_memory import InMemoryBaseRepository

        service = UserService(UserRepository(InMemoryBaseRepository(entity_name="User")))

        user = await service.create_user(john_doe_dto)
        assert (await service.find_by_id(user.id)).username == "john_doe"

        with pytest.raises(EntityAlreadyExistsError):
            await service.create_user(dto("john_doe", "another@example.com"))

        updated = await service.update_user(user.id, UpdateUserInputDTO(age=31))
        assert updated.age == 31
        assert updated.updated_at > user.updated_at

        await service.delete_user(user.id)
        assert await service.find_by_id(user.id) is None
