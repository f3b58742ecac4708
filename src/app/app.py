"""Entrypoint ASGI do serviço Slack.

Uso (produção):
    uvicorn app.app:create_app --factory --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    SLACK_REQUEST_VERIFICATION_ENABLED=false \
        uvicorn app.app:create_app --factory --reload --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import create_bolt_app, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_slack_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bolt import App

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup e registra o shutdown."""
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service})


def create_app(bolt_app: App | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        bolt_app: App com os handlers registrados. Se None, cria um App
            vazio a partir das settings do ambiente.
    """
    initialize_app()
    slack = get_slack_settings()
    bolt_app = bolt_app or create_bolt_app(slack)

    fastapi_app = FastAPI(
        title="slack-app-kit",
        description="SDK e framework de roteamento para apps Slack",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.bolt_app = bolt_app
    fastapi_app.include_router(create_api_router(bolt_app, slack.events_path))

    logger.info("app_configured", extra={"events_path": slack.events_path})
    return fastapi_app


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("app_starting_dev_server")
    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
