"""Repository de TeamSeason (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Optional, Union
from football_stats.models.team_season import TeamSeason
from football_stats.schemas.team_season import SeasonTotals, TeamAverageGoals
import logging

logger = logging.getLogger(__name__)

# Limite fixo da busca por vitórias
MIN_WINS_LIMIT = 10

Number = Union[int, float]


def average_goals_for(goals_for: Optional[Number], games_played: Optional[Number]) -> float:
    """
    Média de gols marcados por jogo.

    GoalsFor nulo conta como 0 e GamesPlayed nulo conta como 1 (assimetria
    mantida de propósito, altera a saída observável). GamesPlayed == 0 resulta
    em 0.
    """
    goals = goals_for if goals_for is not None else 0
    games = games_played if games_played is not None else 1
    if games == 0:
        return 0
    return goals / games


class TeamSeasonRepository:
    """Repository async para operações de banco com TeamSeason"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _by_name(self, name: str):
        """Filtro case-insensitive por igualdade (sem regex)"""
        return func.lower(TeamSeason.team) == func.lower(name)

    async def list_all(self) -> List[TeamSeason]:
        """Obtém todos os registros"""
        result = await self.db.execute(select(TeamSeason).order_by(TeamSeason.id))
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> Optional[TeamSeason]:
        """Obtém o primeiro registro (menor id) com o nome informado"""
        result = await self.db.execute(
            select(TeamSeason)
            .filter(self._by_name(name))
            .order_by(TeamSeason.id)
            .limit(1)
        )
        return result.scalars().first()

    async def find_by_min_wins(self, threshold: Number) -> List[TeamSeason]:
        """Registros com Win > threshold, no máximo 10"""
        result = await self.db.execute(
            select(TeamSeason)
            .filter(TeamSeason.win > threshold)
            .order_by(TeamSeason.id)
            .limit(MIN_WINS_LIMIT)
        )
        return list(result.scalars().all())

    async def find_by_year_and_min_goals(self, year: Number, min_goals: Number) -> List[TeamSeason]:
        """Registros do ano com GoalsFor >= min_goals"""
        result = await self.db.execute(
            select(TeamSeason)
            .filter(TeamSeason.year == year, TeamSeason.goals_for >= min_goals)
            .order_by(TeamSeason.id)
        )
        return list(result.scalars().all())

    async def aggregate_totals(self, year: Number) -> Optional[SeasonTotals]:
        """Soma jogos, vitórias e empates do ano; None se não houver registros"""
        result = await self.db.execute(
            select(
                func.count(TeamSeason.id),
                func.sum(TeamSeason.games_played),
                func.sum(TeamSeason.win),
                func.sum(TeamSeason.draw),
            ).filter(TeamSeason.year == year)
        )
        count, games_played, wins, draws = result.one()
        if not count:
            return None
        return SeasonTotals(
            total_games_played=games_played or 0,
            total_wins=wins or 0,
            total_draw=draws or 0,
        )

    async def aggregate_average_goals(self, year: Number) -> List[TeamAverageGoals]:
        """Média de gols por jogo de cada registro do ano"""
        result = await self.db.execute(
            select(
                TeamSeason.team,
                TeamSeason.year,
                TeamSeason.goals_for,
                TeamSeason.games_played,
            )
            .filter(TeamSeason.year == year)
            .order_by(TeamSeason.id)
        )
        return [
            TeamAverageGoals(
                team=row.team,
                year=row.year,
                goals_for=row.goals_for,
                games_played=row.games_played,
                average_goals_for=average_goals_for(row.goals_for, row.games_played),
            )
            for row in result.all()
        ]

    async def insert(self, data: dict) -> TeamSeason:
        """Cria novo registro"""
        record = TeamSeason(**data)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(f"Registro criado: {record.team} ({record.year}) id={record.id}")
        return record

    async def update_by_name(self, name: str, changes: dict) -> Optional[TeamSeason]:
        """Atualiza apenas os campos informados; None se o time não existir"""
        record = await self.find_by_name(name)
        if record is None:
            return None
        for key, value in changes.items():
            setattr(record, key, value)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(f"Registro atualizado: {record.team} id={record.id} campos={sorted(changes)}")
        return record

    async def delete_by_name(self, name: str) -> Optional[TeamSeason]:
        """Remove o registro; None se o time não existir"""
        record = await self.find_by_name(name)
        if record is None:
            return None
        await self.db.delete(record)
        await self.db.commit()
        logger.info(f"Registro removido: {record.team} id={record.id}")
        return record
