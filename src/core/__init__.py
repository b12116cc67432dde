"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, SQLAlchemy, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura (o repositório base é injetado)
"""
