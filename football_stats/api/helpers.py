"""Funções auxiliares dos endpoints"""
import math
from typing import Optional, Union
from fastapi import Request
from football_stats.core.errors import InvalidRequestError
from football_stats.models.team_season import TeamSeason
from football_stats.schemas.team_season import INT32_MAX, INT32_MIN, TeamSeasonResponse

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def parse_number(raw: Optional[str]) -> Optional[Union[int, float]]:
    """
    Converte parâmetro de query em número.

    Retorna None se ausente, vazio ou não numérico. Valores inteiros voltam
    como int para comparar com colunas Integer. Valores além da faixa int4
    são limitados a ela: nenhum registro guarda algo maior, então o
    resultado da comparação não muda.
    """
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    value = min(max(value, INT32_MIN), INT32_MAX)
    return int(value) if float(value).is_integer() else value


async def read_body(request: Request) -> dict:
    """Lê o corpo como JSON ou formulário url-encoded"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidRequestError("Request body must be valid JSON.")
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object.")
    return payload


def serialize_team(record: TeamSeason) -> dict:
    """Registro no formato do JSON de resposta"""
    return TeamSeasonResponse.model_validate(record).model_dump(by_alias=True)
