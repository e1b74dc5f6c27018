"""Endpoints de CRUD dos registros de temporada"""
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from football_stats.api.helpers import read_body, serialize_team
from football_stats.core.database import get_db
from football_stats.core.errors import InvalidRequestError, InvalidTeamDataError, NotFoundError
from football_stats.repositories.team_season_repository import TeamSeasonRepository
from football_stats.schemas.team_season import (
    REQUIRED_FIELDS,
    TeamSeasonCreate,
    TeamSeasonResponse,
    TeamSeasonUpdate,
)

router = APIRouter()


def _validation_summary(exc: ValidationError) -> str:
    fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
    return f"Invalid value for: {', '.join(fields)}"


def _parse_update(payload: dict) -> dict:
    try:
        return TeamSeasonUpdate.model_validate(payload).changes()
    except ValidationError as e:
        raise InvalidRequestError(_validation_summary(e))


async def _update(db: AsyncSession, name: str, changes: dict) -> dict:
    repository = TeamSeasonRepository(db)
    updated = await repository.update_by_name(name, changes)
    if updated is None:
        raise NotFoundError(f"Team '{name}' not found.")
    return {"message": "Team updated successfully!", "updatedTeam": serialize_team(updated)}


@router.get("/alldata", response_model=List[TeamSeasonResponse])
@router.get("/Data", response_model=List[TeamSeasonResponse], include_in_schema=False)
async def get_all_data(db: AsyncSession = Depends(get_db)):
    """Lista todos os registros"""
    repository = TeamSeasonRepository(db)
    return await repository.list_all()


@router.get("/teams/{name}", response_model=TeamSeasonResponse)
async def get_team(name: str, db: AsyncSession = Depends(get_db)):
    """Obtém um registro pelo nome do time (case-insensitive)"""
    repository = TeamSeasonRepository(db)
    team = await repository.find_by_name(name)
    if team is None:
        raise NotFoundError("Team not found.")
    return team


@router.post("/updateTeam")
async def update_team(request: Request, db: AsyncSession = Depends(get_db)):
    """Atualiza um time identificado pelo campo Team do corpo"""
    payload = await read_body(request)
    name = payload.get("Team")
    if not name or not isinstance(name, str):
        raise InvalidRequestError("Team name is required.")

    # Team é a chave de busca, não um campo a alterar
    changes = _parse_update({k: v for k, v in payload.items() if k != "Team"})
    return await _update(db, name, changes)


@router.post("/teams/update/{name}")
async def update_team_by_path(name: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Atualiza um time identificado pelo path; Team no corpo renomeia"""
    payload = await read_body(request)
    changes = _parse_update(payload)
    if "team" in changes and not changes["team"].strip():
        raise InvalidRequestError("Team name must not be blank.")
    return await _update(db, name, changes)


@router.delete("/teams/delete/{name}")
async def delete_team(name: str, db: AsyncSession = Depends(get_db)):
    """Remove um time pelo nome"""
    repository = TeamSeasonRepository(db)
    deleted = await repository.delete_by_name(name)
    if deleted is None:
        raise NotFoundError("Team not found. Deletion failed.")
    return {"message": f"Team '{deleted.team}' deleted successfully."}


@router.post("/addteamdata", status_code=status.HTTP_201_CREATED)
async def add_team_data(request: Request, db: AsyncSession = Depends(get_db)):
    """Cria um registro; todos os nove campos são obrigatórios"""
    payload = await read_body(request)
    # 0, false e "" contam como ausentes, como qualquer valor falso
    missing = [field for field in REQUIRED_FIELDS if not payload.get(field)]
    if missing:
        raise InvalidTeamDataError("Please provide all fields")

    try:
        data = TeamSeasonCreate.model_validate(payload)
    except ValidationError as e:
        raise InvalidTeamDataError(_validation_summary(e))

    repository = TeamSeasonRepository(db)
    team = await repository.insert(data.model_dump())
    return {"success": True, "product": serialize_team(team)}
