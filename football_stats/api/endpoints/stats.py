"""Endpoints de filtros e agregações"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from football_stats.api.helpers import parse_number, serialize_team
from football_stats.core.database import get_db
from football_stats.core.errors import InvalidRequestError, NotFoundError
from football_stats.repositories.team_season_repository import TeamSeasonRepository
from football_stats.schemas.team_season import SeasonTotals, TeamAverageGoals, TeamSeasonResponse

router = APIRouter()


def _require_win(win: Optional[str]):
    threshold = parse_number(win)
    if threshold is None:
        raise InvalidRequestError('Please provide a valid "Win" value.')
    return threshold


def _require_year(year: Optional[str]):
    value = parse_number(year)
    if value is None:
        raise InvalidRequestError("Provide a valid year.")
    return value


async def _totals_or_404(db: AsyncSession, year: Optional[str]) -> SeasonTotals:
    repository = TeamSeasonRepository(db)
    totals = await repository.aggregate_totals(_require_year(year))
    if totals is None:
        raise NotFoundError(f"No data found for {year}.")
    return totals


@router.get("/Win", response_model=List[TeamSeasonResponse])
async def teams_with_min_wins(
    win: Optional[str] = Query(None, alias="Win", description="Retorna times com vitórias acima deste valor"),
    db: AsyncSession = Depends(get_db)
):
    """Times com mais vitórias que o limite (máximo 10)"""
    threshold = _require_win(win)
    repository = TeamSeasonRepository(db)
    teams = await repository.find_by_min_wins(threshold)
    if not teams:
        raise NotFoundError(f"No teams found with wins greater than {win}.")
    return teams


@router.get("/api/football/teams")
async def football_teams_with_min_wins(
    win: Optional[str] = Query(None, alias="Win"),
    db: AsyncSession = Depends(get_db)
):
    """Mesma busca de /Win, envelopada e sem 404 para lista vazia"""
    threshold = _require_win(win)
    repository = TeamSeasonRepository(db)
    teams = await repository.find_by_min_wins(threshold)
    return {
        "message": f"Found {len(teams)} teams with wins greater than {win}.",
        "data": [serialize_team(team) for team in teams],
    }


@router.get("/teams-by-goals", response_model=List[TeamSeasonResponse])
async def teams_by_goals(
    year: Optional[str] = Query(None, alias="Year"),
    goals_for: Optional[str] = Query(None, alias="GoalsFor"),
    db: AsyncSession = Depends(get_db)
):
    """Times de um ano com pelo menos GoalsFor gols marcados"""
    season_year = parse_number(year)
    min_goals = parse_number(goals_for)
    if season_year is None or min_goals is None:
        raise InvalidRequestError("Provide valid Year and GoalsFor.")

    repository = TeamSeasonRepository(db)
    teams = await repository.find_by_year_and_min_goals(season_year, min_goals)
    if not teams:
        raise NotFoundError(f"No teams found for year {year} with goals ≥ {goals_for}.")
    return teams


@router.get("/totalsforYear", response_model=SeasonTotals)
async def totals_for_year(
    year: Optional[str] = Query(None, alias="Year"),
    db: AsyncSession = Depends(get_db)
):
    """Totais de jogos, vitórias e empates de um ano"""
    return await _totals_or_404(db, year)


@router.get("/api/football/stats")
async def football_stats_for_year(
    year: Optional[str] = Query(None, alias="Year"),
    db: AsyncSession = Depends(get_db)
):
    """Totais do ano no envelope {message, stats}"""
    totals = await _totals_or_404(db, year)
    return {
        "message": f"Stats for {year} retrieved successfully.",
        "stats": totals.model_dump(by_alias=True),
    }


@router.get("/api/football/averageGoals", response_model=List[TeamAverageGoals])
async def average_goals(
    year: Optional[str] = Query(None, alias="Year"),
    db: AsyncSession = Depends(get_db)
):
    """Média de gols marcados por jogo de cada time do ano"""
    repository = TeamSeasonRepository(db)
    averages = await repository.aggregate_average_goals(_require_year(year))
    if not averages:
        raise NotFoundError(f"No data found for {year}.")
    return averages
