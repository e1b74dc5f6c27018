"""Testes do repository de TeamSeason"""
import pytest
from football_stats.repositories.team_season_repository import (
    MIN_WINS_LIMIT,
    TeamSeasonRepository,
    average_goals_for,
)


def season(team="Rovers", **overrides) -> dict:
    data = {
        "team": team,
        "games_played": 10,
        "win": 6,
        "draw": 2,
        "loss": 2,
        "goals_for": 20,
        "goals_against": 10,
        "points": 20,
        "year": 2005,
    }
    data.update(overrides)
    return data


async def test_insert_assigns_identity(session):
    repository = TeamSeasonRepository(session)
    record = await repository.insert(season())
    assert record.id is not None
    assert record.team == "Rovers"
    assert await repository.list_all() == [record]


async def test_find_by_name_case_insensitive(session):
    repository = TeamSeasonRepository(session)
    record = await repository.insert(season("Arsenal"))
    for name in ("arsenal", "ARSENAL", "Arsenal"):
        assert await repository.find_by_name(name) is record
    assert await repository.find_by_name("Arse") is None
    assert await repository.find_by_name("%") is None


async def test_find_by_min_wins_is_capped(session):
    repository = TeamSeasonRepository(session)
    for i in range(MIN_WINS_LIMIT + 3):
        await repository.insert(season(f"Team {i}", win=i))
    teams = await repository.find_by_min_wins(1)
    assert len(teams) == MIN_WINS_LIMIT
    assert all(team.win > 1 for team in teams)


async def test_find_by_year_and_min_goals(session):
    repository = TeamSeasonRepository(session)
    await repository.insert(season("A", goals_for=10))
    await repository.insert(season("B", goals_for=11))
    await repository.insert(season("C", goals_for=40, year=2006))
    teams = await repository.find_by_year_and_min_goals(2005, 11)
    assert [team.team for team in teams] == ["B"]


async def test_aggregate_totals(session):
    repository = TeamSeasonRepository(session)
    assert await repository.aggregate_totals(2005) is None
    await repository.insert(season("A", games_played=3, win=1, draw=1))
    await repository.insert(season("B", games_played=4, win=2, draw=0))
    totals = await repository.aggregate_totals(2005)
    assert totals.model_dump(by_alias=True) == {"totalGamesPlayed": 7, "totalWins": 3, "totalDraw": 1}


async def test_aggregate_average_goals(session):
    repository = TeamSeasonRepository(session)
    await repository.insert(season("A", games_played=10, goals_for=25))
    await repository.insert(season("B", games_played=0, goals_for=3))
    averages = await repository.aggregate_average_goals(2005)
    assert [(row.team, row.average_goals_for) for row in averages] == [("A", 2.5), ("B", 0)]
    assert await repository.aggregate_average_goals(1900) == []


async def test_update_by_name(session):
    repository = TeamSeasonRepository(session)
    await repository.insert(season())
    updated = await repository.update_by_name("ROVERS", {"win": 7, "points": 23})
    assert (updated.win, updated.points, updated.draw) == (7, 23, 2)
    assert await repository.update_by_name("Nobody", {"win": 1}) is None


async def test_delete_by_name(session):
    repository = TeamSeasonRepository(session)
    await repository.insert(season())
    deleted = await repository.delete_by_name("rovers")
    assert deleted.team == "Rovers"
    assert await repository.find_by_name("Rovers") is None
    assert await repository.delete_by_name("Rovers") is None


@pytest.mark.parametrize(
    "goals_for, games_played, expected",
    [
        (25, 10, 2.5),
        (5, 0, 0),
        (0, 0, 0),
        (None, 4, 0),
        (3, None, 3),
        (None, None, 0),
    ],
)
def test_average_goals_policy(goals_for, games_played, expected):
    assert average_goals_for(goals_for, games_played) == expected


async def test_find_by_name_folds_non_ascii(session):
    repository = TeamSeasonRepository(session)
    record = await repository.insert(season("São Paulo"))
    assert await repository.find_by_name("SÃO PAULO") is record
    assert await repository.find_by_name("são paulo") is record
