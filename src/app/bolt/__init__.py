"""Framework de roteamento para apps Slack (eventos, comandos, interatividade)."""

from app.bolt.app import App
from app.bolt.config import AppConfig
from app.bolt.context import Context
from app.bolt.matchers import IdMatcher, Matchable, TextMatcher
from app.bolt.middleware import (
    IgnoringSelfEvents,
    Middleware,
    RequestVerification,
    SingleTeamAuthorization,
    SslCheck,
)
from app.bolt.request import Request, RequestHeaders, RequestType, build_request
from app.bolt.response import Response

__all__ = [
    "App",
    "AppConfig",
    "Context",
    "IdMatcher",
    "IgnoringSelfEvents",
    "Matchable",
    "Middleware",
    "Request",
    "RequestHeaders",
    "RequestType",
    "RequestVerification",
    "Response",
    "SingleTeamAuthorization",
    "SslCheck",
    "TextMatcher",
    "build_request",
]
