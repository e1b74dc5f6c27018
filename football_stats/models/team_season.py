"""Modelo TeamSeason"""
from sqlalchemy import Column, Integer, String
from football_stats.models.base import BaseModel


class TeamSeason(BaseModel):
    """Estatísticas de um time em uma temporada (uma linha por time/ano)"""
    __tablename__ = "football2005"

    # Sem unique em (team, year): duplicatas são aceitas
    team = Column(String(255), nullable=False, index=True)
    games_played = Column(Integer, nullable=False)
    win = Column(Integer, nullable=False)
    draw = Column(Integer, nullable=False)
    loss = Column(Integer, nullable=False)
    goals_for = Column(Integer, nullable=False)
    goals_against = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<TeamSeason(team='{self.team}', year={self.year}, points={self.points})>"
