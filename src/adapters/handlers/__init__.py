"""
Handlers - Camada de entrada (Driving Adapters).

Traduzem DTOs de entrada em chamadas de serviço e convertem
resultados e erros de domínio para o formato exposto ao chamador.
"""

from .users import ApiResponse, ErrorKind, HandlerError, UserHandler

__all__ = ["ApiResponse", "ErrorKind", "HandlerError", "UserHandler"]
