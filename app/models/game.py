from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base

class Game(Base):
    __tablename__ = "juegos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    # Ruta relativa de la portada ("img/image-...png"). No se cambia después de crear.
    imagen_url: Mapped[str] = mapped_column(String(255), nullable=False)
    # En MySQL se guarda como TINYINT (0/1)
    favorito: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
