"""Handlers globais de exceção

Todas as respostas de erro usam o envelope {"message": ...}; erros do banco
adicionam "error" com a mensagem original.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from football_stats.core.errors import FootballStatsError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Registra todos os handlers de erro na aplicação"""

    @app.exception_handler(FootballStatsError)
    async def football_stats_error_handler(request: Request, exc: FootballStatsError):
        logger.info(f"{exc.http_status} em {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Requisição inválida em {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Erro de banco em {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Database error", "error": str(exc)},
        )

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
