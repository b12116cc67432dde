"""
Handler de Usuários.

Tradução pura entre o chamador e o UserService:
- DTO de entrada → chamada de serviço
- Entidade → UserOutputDTO
- Exceção de domínio → HandlerError (mapeamento um-para-um)

Mapeamento de erros:
    EntityNotFoundError       → NOT_FOUND        (404)
    EntityAlreadyExistsError  → ALREADY_EXISTS   (409)
    ValidationError           → VALIDATION_ERROR (400)
    DatabaseError             → DATABASE_ERROR   (500)
    InternalError / outras    → INTERNAL_ERROR   (500)

Exceções que não são de domínio propagam sem tradução.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import wraps
from typing import Any, Dict, List, Optional
import logging

from src.core.shared.exceptions import (
    DatabaseError,
    DomainException,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.pagination import PaginatedResult
from src.core.users.dtos import (
    AgeRangeQueryDTO,
    CreateUserInputDTO,
    ListUsersQueryDTO,
    UpdateUserInputDTO,
    UserOutputDTO,
    UserStatisticsDTO,
)
from src.core.users.services import UserService

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Categorias de erro expostas ao chamador, com status HTTP."""

    NOT_FOUND = ("NOT_FOUND", 404)
    ALREADY_EXISTS = ("ALREADY_EXISTS", 409)
    VALIDATION_ERROR = ("VALIDATION_ERROR", 400)
    DATABASE_ERROR = ("DATABASE_ERROR", 500)
    INTERNAL_ERROR = ("INTERNAL_ERROR", 500)

    def __init__(self, label: str, status_code: int):
        self.label = label
        self.status_code = status_code


class HandlerError(Exception):
    """
    Erro exposto pelo handler.

    Attributes:
        kind: Categoria do erro
        message: Mensagem legível
        details: Dados adicionais (campo, entidade, código de domínio)
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[Dict[str, Any]] = None):
        self.kind = kind
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def __str__(self) -> str:
        return f"[{self.kind.label}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.kind.label,
            "message": self.message,
            "details": self.details,
        }

    @classmethod
    def from_domain(cls, exc: DomainException) -> "HandlerError":
        """
        Converte exceção de domínio em HandlerError.

        Args:
            exc: Exceção de domínio capturada

        Returns:
            HandlerError com categoria correspondente
        """
        if isinstance(exc, EntityNotFoundError):
            kind = ErrorKind.NOT_FOUND
        elif isinstance(exc, EntityAlreadyExistsError):
            kind = ErrorKind.ALREADY_EXISTS
        elif isinstance(exc, ValidationError):
            kind = ErrorKind.VALIDATION_ERROR
        elif isinstance(exc, DatabaseError):
            kind = ErrorKind.DATABASE_ERROR
        else:
            kind = ErrorKind.INTERNAL_ERROR

        details = exc.to_dict()
        details.pop("message", None)
        return cls(kind, exc.message, details)


@dataclass
class ApiResponse:
    """
    Envelope padronizado de resposta.

    Formato: {success, data, error}
    """

    success: bool
    data: Any = None
    error: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def ok(cls, data: Any = None) -> "ApiResponse":
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        elif isinstance(data, list):
            data = [item.to_dict() if hasattr(item, "to_dict") else item for item in data]
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: HandlerError) -> "ApiResponse":
        return cls(success=False, error=error.to_dict())

    def to_dict(self) -> dict:
        response = {"success": self.success}
        if self.data is not None:
            response["data"] = self.data
        if self.error is not None:
            response["error"] = self.error
        return response


def translate_errors(method):
    """Decorator: converte DomainException em HandlerError."""

    @wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except DomainException as e:
            error = HandlerError.from_domain(e)
            logger.debug(f"{method.__name__} failed: {error}")
            raise error from e

    return wrapper


class UserHandler:
    """
    Handler de usuários.

    Example:
        handler = UserHandler(service)
        output = await handler.create_user(CreateUserInputDTO(...))
        print(output.to_dict())
    """

    def __init__(self, service: UserService):
        self.service = service

    @translate_errors
    async def create_user(self, input_dto: CreateUserInputDTO) -> UserOutputDTO:
        user = await self.service.create_user(input_dto)
        return UserOutputDTO.from_entity(user)

    @translate_errors
    async def get_user(self, user_id: str) -> UserOutputDTO:
        user = await self.service.get_user(user_id)
        return UserOutputDTO.from_entity(user)

    @translate_errors
    async def find_by_id(self, user_id: str) -> Optional[UserOutputDTO]:
        user = await self.service.find_by_id(user_id)
        return UserOutputDTO.from_entity(user) if user else None

    @translate_errors
    async def find_by_username(self, username: str) -> Optional[UserOutputDTO]:
        user = await self.service.find_by_username(username)
        return UserOutputDTO.from_entity(user) if user else None

    @translate_errors
    async def find_by_email(self, email: str) -> Optional[UserOutputDTO]:
        user = await self.service.find_by_email(email)
        return UserOutputDTO.from_entity(user) if user else None

    @translate_errors
    async def update_user(self, user_id: str, input_dto: UpdateUserInputDTO) -> UserOutputDTO:
        user = await self.service.update_user(user_id, input_dto)
        return UserOutputDTO.from_entity(user)

    @translate_errors
    async def delete_user(self, user_id: str) -> None:
        await self.service.delete_user(user_id)

    @translate_errors
    async def list_users(self, query: ListUsersQueryDTO) -> PaginatedResult[UserOutputDTO]:
        result = await self.service.list_users(query.to_pagination())
        return result.map(UserOutputDTO.from_entity)

    @translate_errors
    async def get_users_by_age_range(self, query: AgeRangeQueryDTO) -> List[UserOutputDTO]:
        users = await self.service.get_users_by_age_range(query.min_age, query.max_age)
        return [UserOutputDTO.from_entity(user) for user in users]

    @translate_errors
    async def count_users(self) -> int:
        return await self.service.count_users()

    @translate_errors
    async def get_statistics(self) -> UserStatisticsDTO:
        return await self.service.get_statistics()
