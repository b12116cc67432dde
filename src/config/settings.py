"""
Settings do serviço de Usuários.

Módulo compatível com DJANGO_SETTINGS_MODULE (backend de banco)
e lido diretamente pela aplicação (seleção de backend, logging,
paginação). Usa variáveis de ambiente, carregadas também de .env.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from src.adapters.django_app.shared.database import DatabaseConfig
from src.core.shared import pagination

# Carregar variáveis de ambiente
load_dotenv()


def env_flag(name: str, default: str = 'False') -> bool:
    """Lê variável booleana (true/1/yes/on)."""
    return os.getenv(name, default).strip().lower() in ('true', '1', 'yes', 'on')


# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =============================================================================
# Segurança
# =============================================================================

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    'SECRET_KEY',
    'django-insecure-dev-key-change-in-production-please'
)

DEBUG = env_flag('DEBUG', 'True')

# =============================================================================
# Backend de armazenamento
# =============================================================================

# USE_DATABASE tem prioridade; USE_POSTGRES mantido por compatibilidade
USE_DATABASE = env_flag('USE_DATABASE', os.getenv('USE_POSTGRES', 'False'))

# =============================================================================
# Aplicações
# =============================================================================

LOCAL_APPS = [
    'src.adapters.django_app.users',
]

INSTALLED_APPS = LOCAL_APPS

# =============================================================================
# Banco de Dados
# =============================================================================

DATABASE_CONFIG = DatabaseConfig.from_env()

if DATABASE_CONFIG.is_sqlite and DATABASE_CONFIG.name not in (':memory:',):
    # Caminhos relativos ficam na raiz do projeto
    DATABASE_CONFIG.name = str(BASE_DIR / DATABASE_CONFIG.name)

DATABASES = {
    'default': DATABASE_CONFIG.to_django_config(),
}

# =============================================================================
# Internacionalização
# =============================================================================

LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# Paginação
# =============================================================================

DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', 20))

# Limite aplicado por PaginationParams (fonte única em src.core)
MAX_PAGE_SIZE = pagination.MAX_PAGE_SIZE

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
