"""
Django Models para o domínio de Usuários.

Estes models são ADAPTERS - implementam a persistência para a
entidade de domínio definida em src/core/users/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Timestamps são atribuídos pela Entity (sem auto_now)
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class UserModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        username: Nome de usuário (único)
        email: Email (único)
        full_name: Nome completo
        age: Idade (opcional)
        created_at: Timestamp de criação
        updated_at: Timestamp de última atualização
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    username = models.CharField(
        max_length=50,
        unique=True,
        help_text="Nome de usuário"
    )

    email = models.CharField(
        max_length=255,
        unique=True,
        help_text="Email do usuário"
    )

    full_name = models.CharField(
        max_length=100,
        help_text="Nome completo"
    )

    age = models.IntegerField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Idade (opcional)"
    )

    # Timestamps
    created_at = models.DateTimeField(
        db_index=True,
        help_text="Data/hora de criação"
    )

    updated_at = models.DateTimeField(
        help_text="Data/hora da última atualização"
    )

    class Meta:
        app_label = 'users'
        db_table = 'users'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['created_at', 'id']

    def __str__(self) -> str:
        return f"{self.username} <{self.email}>"
