"""
Mappers para conversão entre UserEntity (Core) e UserModel (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from src.core.users.entities import UserEntity

from .models import UserModel


class UserMapper:
    """
    Mapper para conversão entre UserEntity e UserModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    """

    @staticmethod
    def to_model(entity: UserEntity) -> UserModel:
        """
        Converte UserEntity para UserModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return UserModel(
            id=entity.id,
            username=entity.username,
            email=entity.email,
            full_name=entity.full_name,
            age=entity.age,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def to_entity(model: UserModel) -> UserEntity:
        """
        Converte UserModel para UserEntity.

        Note:
            Bypassa validações do factory method .create()
            pois dados já foram validados na criação original
        """
        return UserEntity(
            id=str(model.id),
            username=model.username,
            email=model.email,
            full_name=model.full_name,
            age=model.age,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
