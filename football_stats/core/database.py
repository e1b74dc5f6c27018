"""Configuração do banco de dados async"""
from typing import AsyncIterator
from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from football_stats.core.errors import DatabaseConnectionError
import logging

logger = logging.getLogger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def _unicode_lower(value):
    return None if value is None else str(value).lower()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Cria engine async adequado ao driver da URL"""
    if url.startswith("sqlite"):
        # SQLite em memória precisa de uma única conexão compartilhada
        engine = create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

        # lower() nativo do SQLite só converte ASCII; o do Postgres converte Unicode
        @event.listens_for(engine.sync_engine, "connect")
        def register_lower(dbapi_connection, connection_record):
            dbapi_connection.create_function("lower", 1, _unicode_lower)

        return engine
    return create_async_engine(
        url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=echo,
        future=True,
    )


class Database:
    """Conexão com o banco, criada no startup e fechada no shutdown"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = build_engine(url, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        self.connected = False

    async def connect(self) -> None:
        """Cria as tabelas e verifica se o banco responde"""
        # Garante que os modelos estejam registrados no metadata
        import football_stats.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Erro de conexão com o banco: {e}")
            raise DatabaseConnectionError(str(e)) from e

        self.connected = True
        logger.info(f"Banco de dados conectado: {self.engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        """Fecha todas as conexões do banco"""
        await self.engine.dispose()
        self.connected = False
        logger.info("Conexões do banco de dados fechadas")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency async para obter sessão do banco de dados.
    Uso: db: AsyncSession = Depends(get_db)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
