"""
Serviço de Aplicação do Domínio de Usuários.

Orquestra regras de negócio sobre o UserRepository:
- Validação de entrada (via DTOs)
- Unicidade de username e email
- Existência obrigatória em get/update/delete
- Estatísticas agregadas

Note:
    A checagem de unicidade é feita antes da escrita (check-then-act)
    e não é atômica entre chamadas concorrentes. No backend de banco,
    as constraints UNIQUE transformam a corrida em
    EntityAlreadyExistsError.
"""

from typing import List, Optional
import logging

from src.core.shared.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.pagination import PaginatedResult, PaginationParams

from .dtos import CreateUserInputDTO, UpdateUserInputDTO, UserStatisticsDTO
from .entities import UserEntity
from .ports import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Casos de uso de usuários.

    Attributes:
        repository: Repositório de domínio de usuários

    Example:
        service = UserService(UserRepository(base))
        user = await service.create_user(
            CreateUserInputDTO(
                username="john_doe",
                email="john@example.com",
                full_name="John Doe",
                age=30,
            )
        )
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(self, input_dto: CreateUserInputDTO) -> UserEntity:
        """
        Cria usuário garantindo unicidade de username e email.

        Fluxo:
        1. Validar formato do DTO
        2. Verificar username e depois email
        3. Criar entidade e persistir

        Raises:
            ValidationError: Se dados inválidos
            EntityAlreadyExistsError: Se username ou email já em uso
        """
        input_dto.validate()

        await self._ensure_username_available(input_dto.username)
        await self._ensure_email_available(input_dto.email)

        user = UserEntity.create(
            username=input_dto.username,
            email=input_dto.email,
            full_name=input_dto.full_name,
            age=input_dto.age,
        )
        created = await self.repository.create(user)

        logger.info(f"User created: {created.id} ({created.username})")
        return created

    async def get_user(self, user_id: str) -> UserEntity:
        """
        Obtém usuário existente.

        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(
                f"Usuário {user_id} não encontrado",
                entity_type="User",
                entity_id=user_id,
            )
        return user

    async def find_by_id(self, user_id: str) -> Optional[UserEntity]:
        return await self.repository.find_by_id(user_id)

    async def find_by_username(self, username: str) -> Optional[UserEntity]:
        return await self.repository.find_by_username(username)

    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        return await self.repository.find_by_email(email)

    async def list_users(self, pagination: PaginationParams) -> PaginatedResult[UserEntity]:
        return await self.repository.list(pagination)

    async def get_all_users(self) -> List[UserEntity]:
        return await self.repository.find_all()

    async def update_user(self, user_id: str, input_dto: UpdateUserInputDTO) -> UserEntity:
        """
        Atualiza campos informados do usuário.

        Username e email só são verificados quando mudam de valor.

        Raises:
            ValidationError: Se dados inválidos
            EntityNotFoundError: Se usuário não existe
            EntityAlreadyExistsError: Se novo username/email já em uso
        """
        input_dto.validate()
        existing = await self.get_user(user_id)

        changes = input_dto.changes()
        if "username" in changes and changes["username"] != existing.username:
            await self._ensure_username_available(changes["username"])
        if "email" in changes and changes["email"] != existing.email:
            await self._ensure_email_available(changes["email"])

        updated = await self.repository.update(user_id, changes)

        logger.info(f"User updated: {user_id} ({', '.join(changes) or 'touch'})")
        return updated

    async def delete_user(self, user_id: str) -> None:
        """
        Remove usuário.

        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        if not await self.repository.exists(user_id):
            raise EntityNotFoundError(
                f"Usuário {user_id} não encontrado",
                entity_type="User",
                entity_id=user_id,
            )
        await self.repository.delete(user_id)

        logger.info(f"User deleted: {user_id}")

    async def get_users_by_age_range(self, min_age: int, max_age: int) -> List[UserEntity]:
        """
        Lista usuários com idade na faixa [min_age, max_age].

        Raises:
            ValidationError: Se min_age > max_age
        """
        if min_age > max_age:
            raise ValidationError(
                "Idade mínima não pode ser maior que a idade máxima",
                field="min_age",
            )
        return await self.repository.find_by_age_range(min_age, max_age)

    async def count_users(self) -> int:
        return await self.repository.count()

    async def get_statistics(self) -> UserStatisticsDTO:
        """Calcula total, quantidade com idade e média de idade."""
        users = await self.repository.find_all()
        ages = [user.age for user in users if user.has_age]

        average_age = sum(ages) / len(ages) if ages else None

        return UserStatisticsDTO(
            total_users=len(users),
            users_with_age=len(ages),
            average_age=average_age,
        )

    async def _ensure_username_available(self, username: str) -> None:
        if await self.repository.find_by_username(username.strip()) is not None:
            raise EntityAlreadyExistsError(
                f"Username '{username}' já existe",
                entity_type="User",
                field="username",
            )

    async def _ensure_email_available(self, email: str) -> None:
        if await self.repository.find_by_email(email.strip()) is not None:
            raise EntityAlreadyExistsError(
                f"Email '{email}' já existe",
                entity_type="User",
                field="email",
            )
