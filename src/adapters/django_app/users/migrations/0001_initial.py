"""
Migration inicial para o domínio de Usuários.

Cria a tabela:
- users: id (PK), username/email únicos, idade indexada
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UserModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('username', models.CharField(
                    max_length=50,
                    unique=True,
                    help_text='Nome de usuário'
                )),
                ('email', models.CharField(
                    max_length=255,
                    unique=True,
                    help_text='Email do usuário'
                )),
                ('full_name', models.CharField(
                    max_length=100,
                    help_text='Nome completo'
                )),
                ('age', models.IntegerField(
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Idade (opcional)'
                )),
                ('created_at', models.DateTimeField(
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
                ('updated_at', models.DateTimeField(
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'db_table': 'users',
                'ordering': ['created_at', 'id'],
            },
        ),
    ]
