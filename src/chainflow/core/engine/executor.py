# src/chainflow/core/engine/executor.py
"""
Executor sequencial de cadeias de processamento.

O executor avalia a cadeia na ordem atual do registry, no momento da
chamada de `run()`. É nesse ponto que os bindings de entrada são
resolvidos, refletindo todas as mutações feitas após a montagem.

Política de execução (v1):
- Steps executam um por vez, na ordem do registry
- Um Step cujo predecessor não terminou com SUCCESS é marcado SKIPPED
- Exceções viram resultados FAILED com `payload["error"]` serializável
- `engine.fail_fast` (padrão: true) interrompe na primeira falha
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from chainflow.core.config.hashing import compute_config_hash
from chainflow.core.errors import (
    ChainErrorPayload,
    engine_configuration_error,
    engine_execution_error,
)
from chainflow.core.exceptions import ChainConfigurationError, ChainException
from chainflow.core.pipeline.chain import ProcessingChain
from chainflow.core.pipeline.context import RunContext
from chainflow.core.pipeline.step import Step
from chainflow.core.pipeline.types import StepResult, StepStatus


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução de cadeia."""

    steps: Dict[str, StepResult] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)
    config_hash: str = ""

    @property
    def succeeded(self) -> bool:
        return bool(self.steps) and all(r.status == StepStatus.SUCCESS for r in self.steps.values())

    def statuses(self) -> Dict[str, StepStatus]:
        return {name: r.status for name, r in self.steps.items()}


class ChainExecutor:
    """Executa uma `ProcessingChain` em ordem, resolvendo entradas de forma adiada."""

    def __init__(self, *, chain: ProcessingChain, ctx: RunContext):
        self.chain = chain
        self.ctx = ctx

    def _fail_fast(self) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        return bool(engine_cfg.get("fail_fast", True))

    def _exception_to_error(self, exc: Exception, *, step: str) -> ChainErrorPayload:
        """Converte exceções em ChainErrorPayload (serializável, acionável).

        Regras:
        - ChainConfigurationError: código estável de configuração.
        - Demais ChainException: nome da classe como código estável.
        - Outras exceções: ENGINE_EXECUTION_ERROR sem expor stack trace.
        """
        if isinstance(exc, ChainConfigurationError):
            return engine_configuration_error(
                message=str(exc),
                details=dict(exc.details or {}),
                hint=exc.hint or "Revise a configuração da cadeia antes de reexecutar.",
            )

        if isinstance(exc, ChainException):
            return ChainErrorPayload(
                type=exc.__class__.__name__,
                message=str(exc) or "Erro de execução",
                details=dict(exc.details or {}),
                hint=exc.hint,
            )

        return engine_execution_error(
            step=step,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc) or None,
        )

    def _mk_result(self, *, step: Step, status: StepStatus, summary: str, payload: Dict[str, Any] | None = None) -> StepResult:
        return StepResult(
            step_name=step.name,
            status=status,
            summary=summary,
            warnings=list(self.ctx.warnings.get(step.name, [])),
            payload=dict(payload or {}),
        )

    def run(self) -> RunResult:
        ordered = self.chain.list()
        results: Dict[str, StepResult] = {}
        previous: StepResult | None = None

        for step in ordered:
            name = step.name

            if previous is not None and previous.status != StepStatus.SUCCESS:
                results[name] = self._mk_result(
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary="skipped due to unsuccessful predecessor",
                )
                previous = results[name]
                continue

            try:
                step_result = step.run(self.ctx)
                if not isinstance(step_result, StepResult):
                    raise ChainConfigurationError(
                        message="Step retornou tipo inválido",
                        details={
                            "step": name,
                            "expected": "StepResult",
                            "received": type(step_result).__name__,
                        },
                        hint="Ajuste o Step para retornar StepResult",
                    )
                results[name] = step_result

            except Exception as e:
                error = self._exception_to_error(e, step=name)
                error.details.setdefault("step", name)
                self.ctx.log(step_id=name, level="ERROR", message=error.message, error_type=error.type)

                results[name] = self._mk_result(
                    step=step,
                    status=StepStatus.FAILED,
                    summary=error.message,
                    payload={"error": error.to_dict()},
                )

                if self._fail_fast():
                    break

            previous = results[name]

        return RunResult(
            steps=results,
            order=[s.name for s in ordered],
            config_hash=compute_config_hash(dict(self.ctx.config or {})),
        )
