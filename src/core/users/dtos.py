"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para a camada de handlers.

Tipos de DTOs:
- Input DTOs: Dados de entrada com validação de formato
- Output DTOs: Dados formatados para resposta
- Query DTOs: Parâmetros de listagem
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared.pagination import DEFAULT_PAGE_SIZE, PaginationParams
from src.core.shared.validation import (
    validate_email,
    validate_length,
    validate_not_empty,
    validate_range,
    validate_username,
)

from .entities import UserEntity


FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 100
AGE_MIN = 1
AGE_MAX = 150


def _validate_full_name(full_name: str) -> None:
    validate_not_empty(full_name, "full_name")
    validate_length(
        full_name.strip(),
        "full_name",
        min_length=FULL_NAME_MIN_LENGTH,
        max_length=FULL_NAME_MAX_LENGTH,
    )


def _check_keys(cls, data: Mapping[str, Any], required: tuple = ()) -> None:
    """Rejeita chaves desconhecidas e ausência de obrigatórias."""
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValidationError(f"Campos desconhecidos: {', '.join(unknown)}", field=unknown[0])
    for name in required:
        if data.get(name) is None:
            raise ValidationError(f"{name} é obrigatório", field=name)


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateUserInputDTO:
    """
    DTO de entrada para criar usuário.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.

    Regras de formato:
    - username: 3 a 50 caracteres [a-zA-Z0-9_]
    - email: formato de email válido
    - full_name: 2 a 100 caracteres
    - age: 1 a 150 (opcional)
    """

    username: str
    email: str
    full_name: str
    age: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateUserInputDTO":
        _check_keys(cls, data, required=("username", "email", "full_name"))
        return cls(**data)

    def validate(self) -> None:
        """
        Valida formato dos campos.

        Raises:
            ValidationError: No primeiro campo inválido
        """
        validate_username(self.username)
        validate_email(self.email)
        _validate_full_name(self.full_name)
        if self.age is not None:
            validate_range(self.age, "age", minimum=AGE_MIN, maximum=AGE_MAX)

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "age": self.age,
        }


@dataclass(frozen=True)
class UpdateUserInputDTO:
    """
    DTO de entrada para atualização parcial.

    Campos None não são alterados.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UpdateUserInputDTO":
        _check_keys(cls, data)
        return cls(**data)

    def validate(self) -> None:
        if self.username is not None:
            validate_username(self.username)
        if self.email is not None:
            validate_email(self.email)
        if self.full_name is not None:
            _validate_full_name(self.full_name)
        if self.age is not None:
            validate_range(self.age, "age", minimum=AGE_MIN, maximum=AGE_MAX)

    def changes(self) -> Dict[str, Any]:
        """Retorna apenas os campos informados."""
        result = {}
        for name, value in self.to_dict().items():
            if value is None:
                continue
            result[name] = value.strip() if isinstance(value, str) else value
        return result

    @property
    def is_empty(self) -> bool:
        return not self.changes()

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "age": self.age,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UserOutputDTO:
    """
    DTO de saída com dados do usuário.

    Attributes:
        id: Identificador único
        username: Nome de usuário
        email: Email
        full_name: Nome completo
        age: Idade (se informada)
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização
    """

    id: str
    username: str
    email: str
    full_name: str
    age: Optional[int]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "UserOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade UserEntity

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            username=entity.username,
            email=entity.email,
            full_name=entity.full_name,
            age=entity.age,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "age": self.age,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class UserStatisticsDTO:
    """
    Estatísticas agregadas dos usuários.

    Attributes:
        total_users: Total de usuários
        users_with_age: Usuários com idade informada
        average_age: Média de idade (None se ninguém informou idade)
    """

    total_users: int
    users_with_age: int
    average_age: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "total_users": self.total_users,
            "users_with_age": self.users_with_age,
            "average_age": self.average_age,
        }


# =============================================================================
# QUERY DTOs
# =============================================================================

@dataclass(frozen=True)
class ListUsersQueryDTO:
    """Parâmetros de listagem paginada (page 1-indexed)."""

    page: int = 1
    per_page: int = DEFAULT_PAGE_SIZE

    def to_pagination(self) -> PaginationParams:
        return PaginationParams(page=self.page, per_page=self.per_page)


@dataclass(frozen=True)
class AgeRangeQueryDTO:
    """Faixa de idade inclusiva."""

    min_age: int
    max_age: int
