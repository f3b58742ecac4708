"""App: framework de roteamento e composição do serviço.

Subpastas:
- bolt/: App, Context, middlewares e matchers
- bootstrap/: inicialização (logging, settings, App padrão)
- observability/: correlation_id para logs estruturados

Padrão: app roteia; api adapta; config configura; utils apoia.
"""
