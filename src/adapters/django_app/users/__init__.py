"""
Django App de Usuários - backend relacional do repositório base.
"""
