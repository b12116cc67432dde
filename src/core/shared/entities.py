"""
Entidade base do domínio.

Fornece identidade (UUID), timestamps de auditoria e igualdade por ID
para todas as entidades persistidas pelos repositórios.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar, Mapping, Optional, Tuple
import uuid

from .datetime_utils import next_timestamp, utc_now
from .exceptions import ValidationError


@dataclass
class BaseEntity:
    """
    Entidade base com identidade e timestamps.

    Invariantes:
    - id é gerado na criação e nunca muda
    - Na criação, updated_at == created_at
    - Cada touch() torna updated_at estritamente maior

    Attributes:
        id: Identificador único (UUID em texto)
        created_at: Data/hora de criação (UTC)
        updated_at: Data/hora da última atualização (UTC)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Campos que update() nunca pode alterar
    IMMUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("id", "created_at", "updated_at")

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = utc_now()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def touch(self) -> None:
        """Atualiza updated_at para um instante posterior ao atual."""
        self.updated_at = next_timestamp(self.updated_at)

    @classmethod
    def check_changes(cls, changes: Mapping[str, Any]) -> None:
        """
        Verifica se os campos podem ser alterados por update().

        Raises:
            ValidationError: Se algum campo é desconhecido ou imutável
        """
        allowed = {f.name for f in fields(cls)}
        for name in changes:
            if name not in allowed:
                raise ValidationError(f"Campo desconhecido: {name}", field=name)
            if name in cls.IMMUTABLE_FIELDS:
                raise ValidationError(f"Campo {name} não pode ser alterado", field=name)

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """Aplica alterações parciais e renova updated_at."""
        self.check_changes(changes)
        for name, value in changes.items():
            setattr(self, name, value)
        self.touch()

    def __eq__(self, other: object) -> bool:
        """Entidades são iguais se têm mesmo ID."""
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
