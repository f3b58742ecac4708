"""Base dos objetos da Web API.

Campos desconhecidos são preservados: a API adiciona atributos com
frequência e o SDK não deve descartá-los.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SlackObject(BaseModel):
    """Objeto retornado pela Web API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
