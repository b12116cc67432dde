"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Contrato genérico de repositório (Port)
- Repositório base em memória e lock de leitura/escrita
- Paginação e entidade base
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    EntityAlreadyExistsError,
    DatabaseError,
    InternalError,
)
from .entities import BaseEntity
from .interfaces import BaseRepository
from .in_memory import InMemoryBaseRepository
from .pagination import PaginationParams, PaginatedResult

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "DatabaseError",
    "InternalError",
    "BaseEntity",
    "BaseRepository",
    "InMemoryBaseRepository",
    "PaginationParams",
    "PaginatedResult",
]
