"""Router principal da API"""
from fastapi import APIRouter
from football_stats.api.endpoints import teams, stats

api_router = APIRouter()

api_router.include_router(teams.router, tags=["teams"])
api_router.include_router(stats.router, tags=["stats"])
