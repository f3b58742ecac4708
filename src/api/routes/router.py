"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(bolt_app))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.slack.router import create_slack_router
from config.settings.slack import DEFAULT_EVENTS_PATH

if TYPE_CHECKING:
    from app.bolt import App


def create_api_router(bolt_app: App, events_path: str = DEFAULT_EVENTS_PATH) -> APIRouter:
    """Cria router principal com health check e endpoint do Slack.

    Args:
        bolt_app: App que recebe as requisições do Slack.
        events_path: Caminho do endpoint do Slack.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(create_slack_router(bolt_app, events_path), tags=["slack"])

    return api_router
