"""Middleware HTTP: cronometragem e registro das escritas na tabela de temporadas"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from time import perf_counter
import logging

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0

# Métodos que criam, alteram ou removem registros de TeamSeason
WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """
    Anota cada resposta com X-Process-Time e X-Request-ID.

    Escritas (insert/update/delete de times) são logadas com status e duração;
    leituras só aparecem no log quando passam de SLOW_REQUEST_SECONDS.
    """

    async def dispatch(self, request: Request, call_next):
        started = perf_counter()
        response = await call_next(request)
        elapsed = perf_counter() - started

        request_id = request.headers.get("X-Request-ID", "unknown")
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Content-Type-Options"] = "nosniff"

        summary = f"{request.method} {request.url.path} -> {response.status_code} em {elapsed:.4f}s (id={request_id})"
        if elapsed > SLOW_REQUEST_SECONDS:
            logger.warning(f"Requisição lenta: {summary}")
        elif request.method in WRITE_METHODS:
            logger.info(summary)

        return response
