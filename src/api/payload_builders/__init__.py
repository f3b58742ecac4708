"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- slack/: mensagens (ack, response_url), opções de menus externos e
  response_action de modais
"""

__all__: list[str] = []
