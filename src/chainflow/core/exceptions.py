"""
chainflow — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do chainflow.

Objetivo:
- Permitir que cadeia, Steps e executor levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ChainErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Erros estruturais do registry (nome duplicado, índice inválido) vivem
  em `core.pipeline.registry`, junto da estrutura que protegem.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChainException(Exception):
    """Base class para exceções internas do chainflow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class ChainConfigurationError(ChainException):
    """Configuração inválida ou inconsistente para a cadeia ou o executor."""


@dataclass(frozen=True)
class StepProcessingError(ChainException):
    """Falha semântica reportada por um Step durante o processamento."""
