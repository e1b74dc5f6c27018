"""Schemas de TeamSeason

Os nomes no JSON (Team, GamesPlayed, ...) são aliases dos atributos do modelo.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Optional

# Faixa de uma coluna INTEGER (int4); valores fora viram 400, não erro de driver
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

StatInt = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]

# Campos obrigatórios na criação, com os nomes usados no JSON
REQUIRED_FIELDS = (
    "Team",
    "GamesPlayed",
    "Win",
    "Draw",
    "Loss",
    "GoalsFor",
    "GoalsAgainst",
    "Points",
    "Year",
)


class TeamSeasonBase(BaseModel):
    """Schema base de TeamSeason"""
    model_config = ConfigDict(populate_by_name=True)

    team: str = Field(alias="Team")
    games_played: StatInt = Field(alias="GamesPlayed")
    win: StatInt = Field(alias="Win")
    draw: StatInt = Field(alias="Draw")
    loss: StatInt = Field(alias="Loss")
    goals_for: StatInt = Field(alias="GoalsFor")
    goals_against: StatInt = Field(alias="GoalsAgainst")
    points: StatInt = Field(alias="Points")
    year: StatInt = Field(alias="Year")


class TeamSeasonCreate(TeamSeasonBase):
    """Schema para criação de TeamSeason"""

    @field_validator("team")
    @classmethod
    def team_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team must not be blank")
        return value


class TeamSeasonUpdate(BaseModel):
    """Schema para atualização parcial de TeamSeason"""
    model_config = ConfigDict(populate_by_name=True)

    team: Optional[str] = Field(default=None, alias="Team")
    games_played: Optional[StatInt] = Field(default=None, alias="GamesPlayed")
    win: Optional[StatInt] = Field(default=None, alias="Win")
    draw: Optional[StatInt] = Field(default=None, alias="Draw")
    loss: Optional[StatInt] = Field(default=None, alias="Loss")
    goals_for: Optional[StatInt] = Field(default=None, alias="GoalsFor")
    goals_against: Optional[StatInt] = Field(default=None, alias="GoalsAgainst")
    points: Optional[StatInt] = Field(default=None, alias="Points")
    year: Optional[StatInt] = Field(default=None, alias="Year")

    def changes(self) -> dict:
        """Somente os campos informados, com nomes de atributo do modelo"""
        return self.model_dump(exclude_none=True)


class TeamSeasonResponse(TeamSeasonBase):
    """Schema de resposta de TeamSeason"""
    id: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SeasonTotals(BaseModel):
    """Totais somados de um ano"""
    model_config = ConfigDict(populate_by_name=True)

    total_games_played: int = Field(alias="totalGamesPlayed")
    total_wins: int = Field(alias="totalWins")
    total_draw: int = Field(alias="totalDraw")


class TeamAverageGoals(BaseModel):
    """Média de gols marcados por jogo de um registro"""
    model_config = ConfigDict(populate_by_name=True)

    team: str = Field(alias="Team")
    year: int = Field(alias="Year")
    goals_for: Optional[int] = Field(default=None, alias="GoalsFor")
    games_played: Optional[int] = Field(default=None, alias="GamesPlayed")
    average_goals_for: float = Field(alias="averageGoalsFor")
