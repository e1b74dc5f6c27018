"""Aplicação principal FastAPI"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from football_stats.core.config import Settings, settings as default_settings
from football_stats.core.database import Database
from football_stats.core.logging_config import setup_logging
from football_stats.core.middleware import RequestTimingMiddleware
from football_stats.core.static import mount_frontend
from football_stats.api.api import api_router
from football_stats.api.error_handlers import register_error_handlers
import logging

# Configura logging
setup_logging()
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Monta a aplicação; o banco é injetado ou criado a partir das settings"""
    settings = settings or default_settings
    database = database or Database(settings.database_url, echo=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciando...")
        # Falha de conexão aborta o startup (uvicorn sai com código != 0)
        await database.connect()
        try:
            yield
        finally:
            logger.info("Aplicação encerrando...")
            await database.close()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API REST de estatísticas de temporada de times de futebol",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Rate limiter
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=settings.rate_limits_list,
        enabled=settings.RATE_LIMIT_ENABLED,
    )

    # Middlewares
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestTimingMiddleware)

    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Endpoint raiz"""
        return "Hello World!"

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy" if database.connected else "starting",
            "version": settings.APP_VERSION
        }

    app.include_router(api_router)

    # Em produção o front-end compilado responde a tudo que não é API
    if settings.is_production:
        mount_frontend(app, settings.STATIC_DIR)

    return app


app = create_app()


def run():
    """Inicia o servidor uvicorn"""
    import uvicorn
    uvicorn.run(
        "football_stats.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG
    )


if __name__ == "__main__":
    run()
