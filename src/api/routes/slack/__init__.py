"""Endpoint HTTP que recebe eventos, comandos e interatividade do Slack."""

from api.routes.slack.router import create_slack_router

__all__ = ["create_slack_router"]
