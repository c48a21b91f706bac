from sqlalchemy import Column, Integer, String
from app.core.database import Base

class Friend(Base):
    __tablename__ = "amigos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
