"""
Repository Base - Implementação base assíncrona com Django ORM.

Implementa o contrato BaseRepository do Core sobre a API assíncrona
do ORM (asave, afirst, aupdate, adelete, acount, aexists, async for).

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries

Tradução de erros:
- IntegrityError (constraint UNIQUE) → EntityAlreadyExistsError
- FieldError (critério inválido)     → ValidationError
- django.db.DatabaseError            → DatabaseError (Core)
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar
import logging

from django.core.exceptions import FieldError
from django.db import models
from django.db import DatabaseError as DjangoDatabaseError
from django.db import IntegrityError
from django.db.models import QuerySet

from src.core.shared.exceptions import (
    DatabaseError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.pagination import PaginatedResult, PaginationParams

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class DjangoBaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django assíncronos.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoUserBaseRepository(DjangoBaseRepository[UserEntity, UserModel]):
            model_class = UserModel
            entity_name = "User"

            def to_entity(self, model):
                return UserMapper.to_entity(model)

            def to_model(self, entity):
                return UserMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Nome usado em mensagens de erro
    entity_name: str = "Entity"

    # Ordenação estável para listagens paginadas
    default_ordering: Tuple[str, ...] = ("created_at", "pk")

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet[M]:
        return self.model_class.objects.all().order_by(*self.default_ordering)

    @contextmanager
    def _database_errors(self) -> Iterator[None]:
        """Traduz exceções do ORM para exceções de domínio."""
        try:
            yield
        except IntegrityError as e:
            raise EntityAlreadyExistsError(
                f"{self.entity_name} viola restrição de unicidade: {e}",
                entity_type=self.entity_name,
            ) from e
        except FieldError as e:
            raise ValidationError(f"Critério inválido: {e}") from e
        except DjangoDatabaseError as e:
            logger.error(f"{self.model_class.__name__} database error: {e}")
            raise DatabaseError(f"Erro de banco de dados: {e}") from e

    def _not_found(self, entity_id: Any) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"{self.entity_name} {entity_id} não encontrado",
            entity_type=self.entity_name,
            entity_id=str(entity_id),
        )

    async def create(self, entity: T) -> T:
        """
        Insere nova linha (force_insert).

        Raises:
            EntityAlreadyExistsError: Se PK ou campo único já existe
        """
        model = self.to_model(entity)
        with self._database_errors():
            await model.asave(force_insert=True)

        logger.debug(f"{self.model_class.__name__} created: {model.pk}")
        return self.to_entity(model)

    async def _get_model(self, entity_id: Any) -> Optional[M]:
        return await self.model_class.objects.filter(pk=entity_id).afirst()

    async def find_by_id(self, entity_id: Any) -> Optional[T]:
        with self._database_errors():
            model = await self._get_model(entity_id)
        return self.to_entity(model) if model is not None else None

    async def update(self, entity_id: Any, changes: Mapping[str, Any]) -> T:
        """
        Aplica alterações parciais via entidade e grava apenas os
        campos alterados (mais updated_at).

        Raises:
            EntityNotFoundError: Se a linha não existe (inclusive se
                removida entre a leitura e a escrita)
            ValidationError: Se algum campo é desconhecido ou imutável
        """
        with self._database_errors():
            model = await self._get_model(entity_id)
            if model is None:
                raise self._not_found(entity_id)

            entity = self.to_entity(model)
            entity.apply_changes(changes)

            updated = self.to_model(entity)
            values = {name: getattr(updated, name) for name in [*changes, "updated_at"]}
            rows = await self.model_class.objects.filter(pk=entity_id).aupdate(**values)
            if rows == 0:
                raise self._not_found(entity_id)

        logger.debug(f"{self.model_class.__name__} updated: {entity_id}")
        return entity

    async def delete(self, entity_id: Any) -> None:
        with self._database_errors():
            deleted_count, _ = await self.model_class.objects.filter(pk=entity_id).adelete()
        if deleted_count == 0:
            raise self._not_found(entity_id)

        logger.debug(f"{self.model_class.__name__} deleted: {entity_id}")

    async def list(self, pagination: PaginationParams) -> PaginatedResult[T]:
        """Página ordenada por (created_at, pk) com contagem total."""
        qs = self._get_base_queryset()
        start = pagination.offset
        with self._database_errors():
            total = await qs.acount()
            items = [
                self.to_entity(m)
                async for m in qs[start:start + pagination.limit]
            ]

        return PaginatedResult(
            items=items,
            total=total,
            page=pagination.page,
            per_page=pagination.per_page,
        )

    async def find_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Use com cuidado em produção - sem paginação!
        """
        with self._database_errors():
            return [self.to_entity(m) async for m in self._get_base_queryset()]

    async def find_one(self, **criteria: Any) -> Optional[T]:
        with self._database_errors():
            model = await self._get_base_queryset().filter(**criteria).afirst()
        return self.to_entity(model) if model is not None else None

    async def filter(self, **criteria: Any) -> List[T]:
        with self._database_errors():
            return [
                self.to_entity(m)
                async for m in self._get_base_queryset().filter(**criteria)
            ]

    async def exists(self, entity_id: Any) -> bool:
        with self._database_errors():
            return await self.model_class.objects.filter(pk=entity_id).aexists()

    async def count(self) -> int:
        with self._database_errors():
            return await self.model_class.objects.acount()

    async def clear(self) -> None:
        with self._database_errors():
            await self.model_class.objects.all().adelete()
