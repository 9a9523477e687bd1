"""
chainflow — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do chainflow.
Erros reportados em resultados de execução devem ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ChainErrorPayload:
    """
    Payload canônico de erro do chainflow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Cadeia / Bindings
STEP_DETACHED = "STEP_DETACHED"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def step_detached(
    *,
    step: str,
    hint: str = "O Step foi removido da cadeia e não contribui com arquivos. Remova também suas referências ou registre um novo Step.",
) -> ChainErrorPayload:
    return ChainErrorPayload(
        type=STEP_DETACHED,
        message=f"Step '{step}' não está registrado na cadeia; entrada resolvida como vazia",
        details={"step": step},
        hint=hint,
    )


def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace e os eventos do run para diagnosticar a falha. Nenhum fallback é aplicado automaticamente.",
) -> ChainErrorPayload:
    return ChainErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante a execução da cadeia",
        details={
            "step": step,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def engine_configuration_error(
    *,
    message: str = "Configuração inválida para execução da cadeia",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a configuração da cadeia e declare explicitamente as opções necessárias antes de reexecutar.",
) -> ChainErrorPayload:
    return ChainErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )
