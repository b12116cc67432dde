"""
Repositório base Django para Usuários.

DRIVEN ADAPTER - cumpre o contrato BaseRepository[UserEntity, str]
do Core; o UserRepository de domínio o compõe como `base`.
As buscas por username, email e faixa de idade viram queries
dedicadas (find_one/filter delegam ao ORM).
"""

import logging

from src.core.users.entities import UserEntity

from ..shared.repository import DjangoBaseRepository
from .mappers import UserMapper
from .models import UserModel

logger = logging.getLogger(__name__)


class DjangoUserBaseRepository(DjangoBaseRepository[UserEntity, UserModel]):
    """
    Implementação Django do repositório base de usuários.

    Example:
        base = DjangoUserBaseRepository()
        repository = UserRepository(base)
        user = await repository.find_by_email("john@example.com")
    """

    model_class = UserModel
    entity_name = "User"

    def to_entity(self, model: UserModel) -> UserEntity:
        return UserMapper.to_entity(model)

    def to_model(self, entity: UserEntity) -> UserModel:
        return UserMapper.to_model(entity)


def build_user_base_repository() -> DjangoUserBaseRepository:
    """Factory usada pelo container (import tardio do ORM)."""
    logger.debug("Using Django user base repository")
    return DjangoUserBaseRepository()
