import argparse
import asyncio

from app.core.config import Settings, settings
from app.core.database import build_engine, create_tables


async def init_db(config: Settings = settings, reset: bool = False):
    print("🔄 Conectando a la base de datos...")
    engine = build_engine(config)
    try:
        if reset:
            # CUIDADO: Esto borra TODOS los juegos y amigos que tengas ahora mismo.
            print("🗑️  Borrando tablas antiguas...")
        # SQLAlchemy revisa los modelos (juegos, amigos) y crea las tablas que falten
        print("✨ Creando tablas (juegos, amigos)...")
        await create_tables(engine, reset=reset)
    finally:
        await engine.dispose()

    print("✅ ¡Base de datos lista!")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Crea las tablas de la librería de juegos")
    parser.add_argument("--reset", action="store_true", help="Borra y vuelve a crear las tablas")
    args = parser.parse_args(argv)
    asyncio.run(init_db(reset=args.reset))


if __name__ == "__main__":
    main()
