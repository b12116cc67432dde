"""
Validadores de campos reutilizáveis.

Cada função lança ValidationError (com o nome do campo) quando o
valor não atende à regra, e retorna None caso contrário.
"""

import re
from typing import Optional

from .exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


def validate_text(value: str, field: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{field} deve ser texto", field=field)


def validate_not_empty(value: Optional[str], field: str) -> None:
    if value is None:
        raise ValidationError(f"{field} é obrigatório", field=field)
    validate_text(value, field)
    if not value.strip():
        raise ValidationError(f"{field} é obrigatório", field=field)


def validate_length(
    value: str,
    field: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> None:
    """
    Valida tamanho de string.

    Args:
        value: Valor a validar
        field: Nome do campo (usado na mensagem e no código do erro)
        min_length: Tamanho mínimo (inclusive)
        max_length: Tamanho máximo (inclusive)
    """
    validate_text(value, field)
    length = len(value)
    if min_length is not None and length < min_length:
        raise ValidationError(
            f"{field} deve ter pelo menos {min_length} caracteres",
            field=field,
        )
    if max_length is not None and length > max_length:
        raise ValidationError(
            f"{field} deve ter no máximo {max_length} caracteres",
            field=field,
        )


def validate_range(
    value: int,
    field: str,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> None:
    # bool é subclasse de int, mas não é uma idade válida
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} deve ser um número inteiro", field=field)
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field} deve ser no mínimo {minimum}", field=field)
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field} deve ser no máximo {maximum}", field=field)


def validate_email(value: str, field: str = "email") -> None:
    validate_not_empty(value, field)
    if not EMAIL_PATTERN.match(value):
        raise ValidationError(f"{field} com formato inválido: {value}", field=field)


def validate_username(value: str, field: str = "username") -> None:
    """Username: 3 a 50 caracteres entre letras, dígitos e underscore."""
    validate_not_empty(value, field)
    validate_length(value, field, min_length=3, max_length=50)
    if not USERNAME_PATTERN.match(value):
        raise ValidationError(
            f"{field} deve conter apenas letras, números e underscore",
            field=field,
        )
