"""Configurações da aplicação"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import cached_property


class Settings(BaseSettings):
    """Configurações da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    # App
    APP_NAME: str = "Football Season Stats API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development ou production

    # Servidor
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: str = (
        "http://localhost:3000,http://localhost:5173,"
        "http://127.0.0.1:3000,http://127.0.0.1:5173"
    )

    # Front-end compilado (servido apenas em produção)
    STATIC_DIR: str = "client/build"

    @cached_property
    def is_production(self) -> bool:
        """Verifica se está em modo produção"""
        return self.ENVIRONMENT.lower() == "production"

    @cached_property
    def cors_origins_list(self) -> list[str]:
        """Retorna lista de origens CORS"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Database
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "football2005"

    @cached_property
    def database_url(self) -> str:
        """Retorna URL completa do banco de dados (sempre com driver async)"""
        url = self.DATABASE_URL or (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql+psycopg2://"):
            return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMITS: str = "1000/hour,100/minute"

    @cached_property
    def rate_limits_list(self) -> list[str]:
        """Limites padrão do slowapi"""
        return [limit.strip() for limit in self.RATE_LIMITS.split(",") if limit.strip()]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"


settings = Settings()
