"""
Demonstração do serviço de Usuários.

Executa o roteiro completo contra o backend escolhido:
criação, duplicidade, buscas, listagem, atualização, faixa de
idade, estatísticas e remoção.

Uso:
    python -m src.main
    python -m src.main --backend database
    USE_DATABASE=true python -m src.main
"""

import argparse
import asyncio

from src.adapters.handlers.users import ApiResponse, ErrorKind, HandlerError
from src.core.users.dtos import CreateUserInputDTO, UpdateUserInputDTO
from src.config.application import Application, Backend, build_application


SAMPLE_USERS = [
    CreateUserInputDTO(
        username="john_doe",
        email="john@example.com",
        full_name="John Doe",
        age=30,
    ),
    CreateUserInputDTO(
        username="jane_smith",
        email="jane@example.com",
        full_name="Jane Smith",
        age=25,
    ),
    CreateUserInputDTO(
        username="bob_wilson",
        email="bob@example.com",
        full_name="Bob Wilson",
    ),
]


def show(title: str, response: ApiResponse) -> None:
    print(f"\n{title}")
    print(f"   {response.to_dict()}")


async def run_demo(app: Application) -> None:
    """Roteiro de exemplo (10 passos)."""
    print("\n1️⃣  Criando usuários...")
    created = []
    for dto in SAMPLE_USERS:
        try:
            user = await app.create_user(dto)
        except HandlerError as e:
            if e.kind is not ErrorKind.ALREADY_EXISTS:
                raise
            # banco já populado por uma execução anterior
            user = await app.find_by_username(dto.username)
        created.append(user)
        print(f"   ✓ {user.username} ({user.id})")

    john = created[0]

    try:
        await app.create_user(
            CreateUserInputDTO(
                username="john_doe",
                email="another@example.com",
                full_name="Another John",
            )
        )
    except HandlerError as e:
        show("2️⃣  Username duplicado (esperado erro)", ApiResponse.failure(e))

    show("3️⃣  Buscando por ID", ApiResponse.ok(await app.get_user(john.id)))

    show("4️⃣  Buscando por username", ApiResponse.ok(await app.find_by_username("jane_smith")))

    page = await app.list_users(page=1, per_page=10)
    show(f"5️⃣  Listando usuários ({page.total})", ApiResponse.ok(page))

    updated = await app.update_user(john.id, UpdateUserInputDTO(age=31))
    show("6️⃣  Atualizando idade do john_doe", ApiResponse.ok(updated))

    in_range = await app.users_by_age_range(25, 32)
    show("7️⃣  Usuários entre 25 e 32 anos", ApiResponse.ok(in_range))

    show("8️⃣  Estatísticas", ApiResponse.ok(await app.statistics()))

    await app.delete_user(john.id)
    print(f"\n9️⃣  Usuário {john.username} removido")

    deleted = await app.find_by_id(john.id)
    print(f"\n🔟 Buscando usuário removido: {'não encontrado' if deleted is None else deleted}")


def main():
    parser = argparse.ArgumentParser(description='Demonstração do serviço de Usuários')
    parser.add_argument(
        '--backend',
        choices=[backend.value for backend in Backend],
        default=None,
        help='Backend de armazenamento (default: USE_DATABASE do ambiente)'
    )
    args = parser.parse_args()

    backend = Backend(args.backend) if args.backend else None

    # Fora do event loop: django.setup()/migrate são síncronos
    app = build_application(backend, run_migrations=True)

    print("\n" + "=" * 60)
    print(f"👤 Users Service - backend {app.backend.value}")
    print("=" * 60)

    asyncio.run(run_demo(app))


if __name__ == '__main__':
    main()
