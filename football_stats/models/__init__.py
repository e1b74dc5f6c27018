"""Models - modelos SQLAlchemy"""
from football_stats.models.team_season import TeamSeason

__all__ = [
    "TeamSeason",
]
