# src/chainflow/core/pipeline/context.py
"""
Contexto de execução compartilhado da cadeia.

Este módulo define o `RunContext`, a estrutura canônica utilizada para
registrar eventos e avisos durante a montagem e a avaliação de uma
cadeia de processamento.

O RunContext atua como o único canal de observabilidade do chainflow:
    - registro de logs estruturados (montagem e execução)
    - coleta de warnings não fatais associados a Steps
    - acesso à configuração resolvida

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Eventos estruturados em vez de texto livre
    - Ausência de estado global compartilhado

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por nome de Step, em ordem de inserção

Limites explícitos:
    - Não executa Steps
    - Não resolve bindings
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class RunContext:
    """
    Contexto de execução de uma cadeia de processamento.

    Consolida a identidade da execução (`run_id`, `created_at`), a
    configuração resolvida e os sinais produzidos por cadeia, bindings
    e Steps (eventos e warnings).

    Decisões arquiteturais:
        - Steps e cadeia reportam apenas via RunContext
        - Eventos são dicionários planos, prontos para serialização
        - Warnings não alteram o status de execução

    Limites explícitos:
        - Não decide políticas de execução
        - Não persiste eventos
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def events_for(self, step_id: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev.get("step_id") == step_id]
