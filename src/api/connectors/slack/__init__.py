"""Conector Slack: adapter de borda para a Web API e requisições recebidas.

Responsabilidades:
- HTTP client para a Web API (métodos tipados em `methods`)
- Assinatura HMAC (X-Slack-Signature)
- Decodificação de eventos, slash commands e interatividade
- Dispatcher de baixo nível da Events API
- Modelos e erros da Web API
"""

from .event_id import compute_inbound_event_id
from .http_client import SlackHttpClient, create_slack_http_client
from .methods import MethodsClient
from .signature import (
    SignatureResult,
    build_signed_headers,
    generate_slack_signature,
    verify_slack_signature,
)
from .slack_errors import SlackApiError, is_permanent_error, parse_slack_error

__all__ = [
    "MethodsClient",
    "SignatureResult",
    "SlackApiError",
    "SlackHttpClient",
    "build_signed_headers",
    "compute_inbound_event_id",
    "create_slack_http_client",
    "generate_slack_signature",
    "is_permanent_error",
    "parse_slack_error",
    "verify_slack_signature",
]
