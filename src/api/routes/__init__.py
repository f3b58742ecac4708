"""Rotas HTTP da API.

- routes/health/: liveness probe
- routes/slack/: endpoint de eventos, comandos e interatividade
- router.py: agrega os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
