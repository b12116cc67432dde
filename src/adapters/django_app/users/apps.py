"""
Configuração do Django App para Usuários.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    """Configuração do app Users."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.users'
    label = 'users'
    verbose_name = 'Usuários'
