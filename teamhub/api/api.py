# teamhub/api/api.py
from fastapi import APIRouter

from teamhub.api.endpoints.users import router as users_router
from teamhub.api.endpoints.teams import router as teams_router
from teamhub.api.endpoints.projects import router as projects_router
from teamhub.api.endpoints.todos import router as todos_router

api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(teams_router, prefix="/teams", tags=["teams"])
api_router.include_router(projects_router, prefix="/projects", tags=["projects"])
api_router.include_router(todos_router, prefix="/todos", tags=["todos"])
