"""
Repositório base em memória.

Implementação genérica do contrato BaseRepository sobre um dict
(ordem de inserção preservada) protegido por um único ReadWriteLock:
leituras compartilham o lock, escritas o recebem com exclusividade.

Princípios:
- Store é um dict por instância, vazio na criação
- Entidades entram e saem como cópias (deepcopy)
- Nenhum corpo protegido pelo lock aguarda outra operação
- Varreduras operam sobre um snapshot tirado sob o lock de leitura
"""

from copy import deepcopy
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar
import logging

from .exceptions import EntityAlreadyExistsError, EntityNotFoundError, ValidationError
from .locks import ReadWriteLock
from .pagination import PaginatedResult, PaginationParams

logger = logging.getLogger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")


# Operadores de lookup suportados nos critérios (estilo Django)
LOOKUPS: Dict[str, Callable[[Any, Any], bool]] = {
    "exact": lambda value, expected: value == expected,
    "iexact": lambda value, expected: (
        value is not None and str(value).lower() == str(expected).lower()
    ),
    "gt": lambda value, expected: value is not None and value > expected,
    "gte": lambda value, expected: value is not None and value >= expected,
    "lt": lambda value, expected: value is not None and value < expected,
    "lte": lambda value, expected: value is not None and value <= expected,
    "in": lambda value, expected: value in expected,
    "isnull": lambda value, expected: (value is None) == bool(expected),
}


def parse_lookup(key: str) -> Tuple[str, str]:
    """
    Separa "age__gte" em ("age", "gte").

    Raises:
        ValidationError: Se o operador não é suportado
    """
    field_name, _, lookup = key.partition("__")
    lookup = lookup or "exact"
    if lookup not in LOOKUPS:
        raise ValidationError(f"Lookup não suportado: {key}", field=field_name)
    return field_name, lookup


def matches(entity: Any, criteria: Mapping[str, Any]) -> bool:
    """Verifica se a entidade satisfaz todos os critérios."""
    for key, expected in criteria.items():
        field_name, lookup = parse_lookup(key)
        if not hasattr(entity, field_name):
            raise ValidationError(f"Campo desconhecido: {field_name}", field=field_name)
        if not LOOKUPS[lookup](getattr(entity, field_name), expected):
            return False
    return True


class InMemoryBaseRepository(Generic[T, ID]):
    """
    Repositório base genérico em memória.

    Type Parameters:
        T: Tipo da entidade (dataclass com atributo `id`)
        ID: Tipo do identificador

    Example:
        base = InMemoryBaseRepository[UserEntity, str](entity_name="User")
        user = await base.create(UserEntity.create(...))
        same = await base.find_by_id(user.id)
    """

    def __init__(self, entity_name: str = "Entity"):
        self.entity_name = entity_name
        self._items: Dict[ID, T] = {}
        self._lock = ReadWriteLock()

    @staticmethod
    def _key(entity: T) -> ID:
        return getattr(entity, "id")

    async def create(self, entity: T) -> T:
        entity_id = self._key(entity)
        async with self._lock.write():
            if entity_id in self._items:
                raise EntityAlreadyExistsError(
                    f"{self.entity_name} {entity_id} já existe",
                    entity_type=self.entity_name,
                    field="id",
                )
            self._items[entity_id] = deepcopy(entity)

        logger.debug(f"{self.entity_name} created: {entity_id}")
        return deepcopy(entity)

    async def find_by_id(self, entity_id: ID) -> Optional[T]:
        async with self._lock.read():
            entity = self._items.get(entity_id)
            return deepcopy(entity) if entity is not None else None

    async def update(self, entity_id: ID, changes: Mapping[str, Any]) -> T:
        """
        Aplica alterações parciais sobre a entidade armazenada.

        Apenas campos declarados na dataclass e não listados em
        IMMUTABLE_FIELDS podem ser alterados. updated_at é renovado
        via touch(), ficando estritamente maior que o valor anterior.

        Raises:
            EntityNotFoundError: Se a entidade não existe
            ValidationError: Se algum campo é desconhecido ou imutável
        """
        async with self._lock.write():
            current = self._items.get(entity_id)
            if current is None:
                raise EntityNotFoundError(
                    f"{self.entity_name} {entity_id} não encontrado",
                    entity_type=self.entity_name,
                    entity_id=str(entity_id),
                )

            updated = deepcopy(current)
            updated.apply_changes(changes)
            self._items[entity_id] = updated

        logger.debug(f"{self.entity_name} updated: {entity_id} ({', '.join(changes)})")
        return deepcopy(updated)

    async def delete(self, entity_id: ID) -> None:
        async with self._lock.write():
            if self._items.pop(entity_id, None) is None:
                raise EntityNotFoundError(
                    f"{self.entity_name} {entity_id} não encontrado",
                    entity_type=self.entity_name,
                    entity_id=str(entity_id),
                )

        logger.debug(f"{self.entity_name} deleted: {entity_id}")

    async def list(self, pagination: PaginationParams) -> PaginatedResult[T]:
        """
        Lista uma página em ordem de inserção.

        Args:
            pagination: Parâmetros de paginação

        Returns:
            Resultado paginado com total de itens do store
        """
        async with self._lock.read():
            snapshot = list(self._items.values())

        start = pagination.offset
        page_items = snapshot[start:start + pagination.limit]
        return PaginatedResult(
            items=[deepcopy(item) for item in page_items],
            total=len(snapshot),
            page=pagination.page,
            per_page=pagination.per_page,
        )

    async def find_all(self) -> List[T]:
        async with self._lock.read():
            return [deepcopy(item) for item in self._items.values()]

    async def find_one(self, **criteria: Any) -> Optional[T]:
        """Primeira entidade (ordem de inserção) que satisfaz os critérios."""
        async with self._lock.read():
            snapshot = list(self._items.values())

        for item in snapshot:
            if matches(item, criteria):
                return deepcopy(item)
        return None

    async def filter(self, **criteria: Any) -> List[T]:
        async with self._lock.read():
            snapshot = list(self._items.values())

        return [deepcopy(item) for item in snapshot if matches(item, criteria)]

    async def exists(self, entity_id: ID) -> bool:
        async with self._lock.read():
            return entity_id in self._items

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._items)

    async def clear(self) -> None:
        """Remove todas as entidades (útil para testes)."""
        async with self._lock.write():
            self._items.clear()
