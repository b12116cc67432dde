"""
Ports do Domínio de Usuários.

UserRepository é o repositório de domínio: compõe um repositório base
genérico (membro `base`) e adiciona buscas específicas de usuários.
A mesma classe funciona com qualquer backend que cumpra o contrato
BaseRepository (memória ou Django ORM).

Example:
    base = InMemoryBaseRepository[UserEntity, str](entity_name="User")
    repository = UserRepository(base)
    user = await repository.find_by_username("john_doe")
"""

from typing import Any, List, Mapping, Optional

from src.core.shared.interfaces import BaseRepository
from src.core.shared.pagination import PaginatedResult, PaginationParams

from .entities import UserEntity


class UserRepository:
    """
    Repositório de usuários por composição.

    Operações genéricas são repassadas sem alteração ao repositório
    base; buscas por campo único usam base.find_one e a faixa de
    idade usa base.filter.

    Attributes:
        base: Repositório base genérico (UserEntity, str)
    """

    def __init__(self, base: BaseRepository[UserEntity, str]):
        self.base = base

    # -------------------------------------------------------------------------
    # Operações genéricas (delegadas)
    # -------------------------------------------------------------------------

    async def create(self, user: UserEntity) -> UserEntity:
        return await self.base.create(user)

    async def find_by_id(self, user_id: str) -> Optional[UserEntity]:
        return await self.base.find_by_id(user_id)

    async def update(self, user_id: str, changes: Mapping[str, Any]) -> UserEntity:
        return await self.base.update(user_id, changes)

    async def delete(self, user_id: str) -> None:
        await self.base.delete(user_id)

    async def list(self, pagination: PaginationParams) -> PaginatedResult[UserEntity]:
        return await self.base.list(pagination)

    async def find_all(self) -> List[UserEntity]:
        return await self.base.find_all()

    async def exists(self, user_id: str) -> bool:
        return await self.base.exists(user_id)

    async def count(self) -> int:
        return await self.base.count()

    # -------------------------------------------------------------------------
    # Buscas específicas do domínio
    # -------------------------------------------------------------------------

    async def find_by_username(self, username: str) -> Optional[UserEntity]:
        """Busca usuário pelo username (comparação exata)."""
        return await self.base.find_one(username=username)

    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        return await self.base.find_one(email=email)

    async def find_by_age_range(self, min_age: int, max_age: int) -> List[UserEntity]:
        """
        Usuários com idade entre min_age e max_age (inclusive).

        Usuários sem idade informada nunca entram no resultado.
        """
        return await self.base.filter(age__gte=min_age, age__lte=max_age)
