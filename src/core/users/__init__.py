"""
Domínio de Usuários.

Este módulo contém a lógica de negócio relacionada a usuários:
- Entidade (UserEntity)
- DTOs (Input/Output Data Transfer Objects)
- Repositório de domínio (UserRepository, por composição)
- Serviço de aplicação (UserService)

Características do Domínio:
- Username e email únicos
- Idade opcional
- Estatísticas agregadas (total, com idade, média)
"""

from .entities import UserEntity
from .dtos import (
    CreateUserInputDTO,
    UpdateUserInputDTO,
    UserOutputDTO,
    UserStatisticsDTO,
    ListUsersQueryDTO,
    AgeRangeQueryDTO,
)
from .ports import UserRepository
from .services import UserService

__all__ = [
    # Entities
    "UserEntity",
    # DTOs
    "CreateUserInputDTO",
    "UpdateUserInputDTO",
    "UserOutputDTO",
    "UserStatisticsDTO",
    "ListUsersQueryDTO",
    "AgeRangeQueryDTO",
    # Ports
    "UserRepository",
    # Services
    "UserService",
]
