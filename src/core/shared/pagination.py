"""
Value objects de paginação compartilhados pelos repositórios.

Páginas são indexadas a partir de 1; o offset é calculado como
(page - 1) * per_page.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, TypeVar

from .exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PaginationParams:
    """Parâmetros de paginação."""
    page: int = 1
    per_page: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("page deve ser maior ou igual a 1", field="page")
        if self.per_page < 1 or self.per_page > MAX_PAGE_SIZE:
            raise ValidationError(
                f"per_page deve estar entre 1 e {MAX_PAGE_SIZE}",
                field="per_page",
            )

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


@dataclass
class PaginatedResult(Generic[T]):
    """Resultado paginado."""
    items: List[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        """Calcula total de páginas."""
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def has_next(self) -> bool:
        """Verifica se tem próxima página."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Verifica se tem página anterior."""
        return self.page > 1

    def map(self, func: Callable[[T], R]) -> "PaginatedResult[R]":
        """Converte os itens mantendo os metadados da página."""
        return PaginatedResult(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            per_page=self.per_page,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dict."""
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }
