"""
Configuração do serviço de Usuários.

Módulos:
- settings: Configurações (env/.env) e settings Django
- container: Dependency Injection Container
- application: Seleção de backend e fachada Application
"""
