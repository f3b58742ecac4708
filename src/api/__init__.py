"""API: camada de borda com o Slack.

Subpastas:
- connectors/: Web API (bindings tipadas), assinatura e payloads recebidos
- payload_builders/: construção de mensagens, opções e respostas de view
- routes/: endpoints HTTP (eventos/interatividade e health)

NÃO PODE conter: roteamento por callback_id nem handlers do app.
"""
