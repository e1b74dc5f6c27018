"""Arquivos estáticos do front-end (SPA)"""
from pathlib import Path
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
import logging

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Serve o build do front-end e devolve index.html para rotas desconhecidas"""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except HTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def mount_frontend(app: FastAPI, directory: str) -> bool:
    """Monta o front-end na raiz, depois das rotas da API"""
    build_dir = Path(directory)
    if not (build_dir / "index.html").is_file():
        logger.warning(f"Front-end não encontrado em {build_dir}, arquivos estáticos desativados")
        return False
    app.mount("/", SPAStaticFiles(directory=build_dir, html=True), name="frontend")
    logger.info(f"Servindo front-end de {build_dir}")
    return True
