from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Base de Datos (MySQL de XAMPP por defecto)
    DATABASE_URL: str = "mysql+aiomysql://root:@localhost:3306/libreria"

    # Pool de conexiones: limitado, los handlers esperan turno si está lleno
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30
    # Cierra conexiones después de 30 minutos (1800s)
    DB_POOL_RECYCLE: int = 1800

    # Crea las tablas al arrancar si no existen
    CREATE_TABLES_ON_STARTUP: bool = True

    # --- IMÁGENES SUBIDAS ---
    # Carpeta en disco y prefijo público (las rutas guardadas son "img/...")
    UPLOAD_DIR: str = "public/img"
    UPLOAD_URL_PREFIX: str = "img"

    # Servidor
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore" # Ignora variables extra en el .env si las hubiera

settings = Settings()
