"""Request Dependencies — hand app-owned collaborators to route handlers.

Invariants:
    - Collaborators live on app.state, built once by the lifespan in main.py
    - Tests swap them with app.dependency_overrides, never by patching modules
"""

from fastapi import Depends, Request

from userapp.api.renderer import Renderer
from userapp.api.user_dispatch import UserDispatch
from userapp.infrastructure.database import DatabaseSessionManager
from userapp.services.user_service import UserService


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_renderer(request: Request) -> Renderer:
    return request.app.state.renderer


def get_user_dispatch(
    service: UserService = Depends(get_user_service),
    renderer: Renderer = Depends(get_renderer),
) -> UserDispatch:
    return UserDispatch(service, renderer)
