"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define o contrato genérico que todo repositório base
deve implementar, seja em memória ou sobre banco de dados.
São os "Ports" da Arquitetura Hexagonal.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from typing import Any, Generic, List, Mapping, Optional, Protocol, TypeVar, runtime_checkable

from .pagination import PaginatedResult, PaginationParams


# Type variables para entidade e identificador
T = TypeVar("T")
ID = TypeVar("ID")


@runtime_checkable
class BaseRepository(Protocol, Generic[T, ID]):
    """
    Interface genérica assíncrona para repositórios base.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório
        ID: Tipo do identificador da entidade

    Semântica comum a todas as implementações:
    - Buscas retornam None quando a entidade não existe
    - update/delete sobre ID inexistente lançam EntityNotFoundError
    - create com ID já existente lança EntityAlreadyExistsError
    - Entidades retornadas são cópias; alterá-las não altera o store

    Critérios de busca (find_one/filter) usam a sintaxe de lookups do
    Django: campo, campo__gte, campo__lte, campo__gt, campo__lt,
    campo__in, campo__iexact.

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    async def create(self, entity: T) -> T:
        """
        Persiste nova entidade.

        Raises:
            EntityAlreadyExistsError: Se o ID (ou campo único) já existe
        """
        ...

    async def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Busca entidade por ID (None se não existir)."""
        ...

    async def update(self, entity_id: ID, changes: Mapping[str, Any]) -> T:
        """
        Aplica alterações parciais e renova updated_at.

        Raises:
            EntityNotFoundError: Se a entidade não existe
            ValidationError: Se algum campo é desconhecido ou imutável
        """
        ...

    async def delete(self, entity_id: ID) -> None:
        """
        Remove entidade.

        Raises:
            EntityNotFoundError: Se a entidade não existe
        """
        ...

    async def list(self, pagination: PaginationParams) -> PaginatedResult[T]:
        """Lista uma página de entidades com a contagem total."""
        ...

    async def find_all(self) -> List[T]:
        ...

    async def find_one(self, **criteria: Any) -> Optional[T]:
        ...

    async def filter(self, **criteria: Any) -> List[T]:
        ...

    async def exists(self, entity_id: ID) -> bool:
        ...

    async def count(self) -> int:
        ...

    async def clear(self) -> None:
        ...
