"""Modelo base para todos os models"""
from sqlalchemy import Column, Integer
from football_stats.core.database import Base


class BaseModel(Base):
    """Classe base abstrata para todos os modelos"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
