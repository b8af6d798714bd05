from fastapi import APIRouter

from app.api.routes import agent_specifications, utils

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(agent_specifications.router)
