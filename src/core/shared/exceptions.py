"""
Exceções de Domínio do serviço de Usuários.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas
(repositório → serviço → handler).

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    ├── EntityNotFoundError (entidade não existe)
    ├── EntityAlreadyExistsError (violação de unicidade)
    ├── DatabaseError (falha do armazenamento)
    └── InternalError (falha inesperada)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            await service.create_user(dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if len(username) < 3:
            raise ValidationError("Username deve ter pelo menos 3 caracteres", field="username")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada por update/delete sobre um ID inexistente e pelo
    serviço quando uma busca obrigatória não retorna resultado.
    Buscas simples (find_by_id) retornam None em vez de lançar.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class EntityAlreadyExistsError(DomainException):
    """
    Violação de unicidade.

    Lançada quando o ID já existe no repositório ou quando um campo
    naturalmente único (username, email) já está em uso.

    Example:
        if await repository.find_by_username(dto.username):
            raise EntityAlreadyExistsError(
                f"Username '{dto.username}' já existe",
                entity_type="User",
                field="username",
            )
    """

    def __init__(self, message: str, entity_type: str = None, field: str = None):
        self.entity_type = entity_type
        self.field = field
        super().__init__(message, "ENTITY_ALREADY_EXISTS")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.field:
            result["field"] = self.field
        return result


class DatabaseError(DomainException):
    """
    Falha do mecanismo de armazenamento.

    O adaptador de banco traduz erros do ORM para esta exceção,
    mantendo a causa original em __cause__.
    """

    def __init__(self, message: str):
        super().__init__(message, "DATABASE_ERROR")


class InternalError(DomainException):
    """Falha inesperada sem categoria mais específica."""

    def __init__(self, message: str):
        super().__init__(message, "INTERNAL_ERROR")
