from fastapi import APIRouter

from bingo.api.v1.endpoints import card, player, room

api_router = APIRouter()

api_router.include_router(room.router, prefix="/rooms", tags=["rooms"])

api_router.include_router(player.router, prefix="/players", tags=["players"])

api_router.include_router(card.router, prefix="/cards", tags=["cards"])
