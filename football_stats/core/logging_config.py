"""Logging do processo da API (stdout sempre, arquivo fora do modo DEBUG)"""
import logging
import sys
from pathlib import Path
from typing import Optional
from football_stats.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Bibliotecas cujo INFO polui o log de cada consulta
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def setup_logging(settings: Optional[Settings] = None):
    """
    Configura o logger raiz a partir de LOG_LEVEL e LOG_FILE.

    Em DEBUG o SQL já sai pelo echo do engine, então o arquivo é dispensado.
    """
    settings = settings or default_settings

    handlers = [logging.StreamHandler(sys.stdout)]
    if not settings.DEBUG:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configurado (nível {settings.LOG_LEVEL.upper()}, arquivo={'não' if settings.DEBUG else settings.LOG_FILE})")
    return logger
