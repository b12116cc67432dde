"""
Entidades do Domínio de Usuários.

Entidades:
- UserEntity: Agregado principal do contexto de usuários

Regras de Negócio Encapsuladas:
- Validação de dados na criação
- Username e email normalizados (sem espaços nas bordas)
- Idade opcional, limitada a 0..150
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.datetime_utils import to_iso
from src.core.shared.entities import BaseEntity
from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import EMAIL_PATTERN, validate_not_empty, validate_range


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


@dataclass(eq=False)
class UserEntity(BaseEntity):
    """
    Entidade de Domínio: Usuário.

    Invariantes:
    - Username e nome completo não podem ser vazios
    - Email deve ter formato válido
    - Idade, quando informada, fica entre 0 e 150
    - updated_at == created_at na criação

    Attributes:
        id: Identificador único (UUID)
        username: Nome de usuário (único)
        email: Email (único)
        full_name: Nome completo
        age: Idade (opcional)
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização

    Example:
        user = UserEntity.create(
            username="john_doe",
            email="john@example.com",
            full_name="John Doe",
            age=30,
        )
    """

    username: str = ""
    email: str = ""
    full_name: str = ""
    age: Optional[int] = None

    AGE_MIN = 0
    AGE_MAX = 150

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        full_name: str,
        age: Optional[int] = None,
    ) -> "UserEntity":
        """
        Factory method para criar usuário com validações.

        Gera novo ID e timestamps iguais de criação/atualização.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        user = cls(
            username=_strip(username),
            email=_strip(email),
            full_name=_strip(full_name),
            age=age,
        )
        user.validate()
        return user

    def validate(self) -> None:
        """
        Valida regras da entidade.

        Raises:
            ValidationError: No primeiro campo inválido
        """
        validate_not_empty(self.username, "username")
        validate_not_empty(self.email, "email")
        if "@" not in self.email or not EMAIL_PATTERN.match(self.email):
            raise ValidationError(f"Email inválido: {self.email}", field="email")
        validate_not_empty(self.full_name, "full_name")
        if self.age is not None:
            validate_range(self.age, "age", minimum=self.AGE_MIN, maximum=self.AGE_MAX)

    @property
    def has_age(self) -> bool:
        return self.age is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serializa entidade (timestamps em ISO-8601)."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "age": self.age,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<User {self.id[:8]}: {self.username}>"
