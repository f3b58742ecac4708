"""Connectors: adapters de borda para APIs externas.

Estrutura:
- slack/: Web API, Events API, slash commands e interatividade
"""

__all__: list[str] = []
