# src/chainflow/core/pipeline/chain.py
"""
Cadeia de processamento com conexão adiada de entradas.

Este módulo define a `ProcessingChain`, que compõe o `NamedRegistry` e
o `LazySource` para apresentar uma cadeia ordenada e mutável de Steps:

    - todo Step que entra na cadeia recebe um binding de entrada
    - materializar um Step por tipo gera um nome determinístico
    - remoções e inserções redirecionam o fluxo sem reconexão explícita

Regra de nomes:
    `<nome da origem><nome de exibição do tipo>`, onde o nome de exibição
    vem do mapeamento fornecido pelo hospedeiro ou, na ausência dele, do
    `__name__` do tipo sem o sufixo configurado (padrão: "Task").
    Exemplo: origem `main` + `MinifyTask` → `mainMinify`.

Decisões arquiteturais:
    - A construção de Steps é delegada a uma `StepFactory` injetada
    - O registro é tudo-ou-nada: se o configurador falha, o Step é
      removido antes de a exceção propagar
    - Nenhum Step existente é reconectado quando outro entra ou sai
    - Steps desanexados resolvem vazio; a política de aviso é definida
      por configuração (`chain.detached_policy`)

Invariantes:
    - Exatamente um Step é registrado por chamada bem-sucedida de
      `materialize`, `add` ou `insert`
    - A origem da cadeia nunca muda

Limites explícitos:
    - Não executa Steps (ver `core.engine.executor`)
    - Não acessa filesystem
    - Não é segura para mutação concorrente
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from chainflow.core.errors import step_detached
from chainflow.core.exceptions import ChainConfigurationError

from .binding import DetachedStepWarning, LazySource
from .context import RunContext
from .registry import DuplicateNameError, NamedRegistry
from .step import Step, StepFactory
from .task import TypeFactory
from .types import FileSet, SourceSet

CHAIN_STEP_ID = "chain"
DETACHED_POLICIES = ("ignore", "warn")


class ProcessingChain:
    """Cadeia ordenada de Steps com entradas resolvidas de forma adiada."""

    def __init__(
        self,
        source: SourceSet,
        *,
        factory: Optional[StepFactory] = None,
        display_names: Optional[Mapping[Any, str]] = None,
        config: Optional[Dict[str, Any]] = None,
        ctx: Optional[RunContext] = None,
    ):
        if not isinstance(source, SourceSet):
            raise TypeError(f"source deve ser SourceSet, recebido: {type(source).__name__}")

        self._source = source
        self._registry = NamedRegistry()
        self._factory: StepFactory = factory or TypeFactory()
        self._display_names: Dict[Any, str] = dict(display_names or {})
        self.ctx = ctx

        if config is None:
            config = ctx.config if ctx is not None else {}
        chain_cfg = (config or {}).get("chain", {}) or {}

        suffix = chain_cfg.get("strip_suffix", "Task")
        if suffix is None:
            suffix = ""
        if not isinstance(suffix, str):
            raise ChainConfigurationError(
                message=f"Sufixo de nome inválido: {suffix!r}",
                details={"key": "chain.strip_suffix", "received": type(suffix).__name__},
                hint="Use uma string (vazia desativa a remoção).",
            )
        self._strip_suffix = suffix
        self._detached_policy = chain_cfg.get("detached_policy", "ignore")
        if self._detached_policy not in DETACHED_POLICIES:
            raise ChainConfigurationError(
                message=f"Política de Step desanexado inválida: {self._detached_policy!r}",
                details={"key": "chain.detached_policy", "allowed": list(DETACHED_POLICIES)},
                hint="Use 'ignore' ou 'warn'.",
            )

    @property
    def source(self) -> SourceSet:
        return self._source

    def get_source(self) -> SourceSet:
        return self._source

    # -----------------------------
    # Naming
    # -----------------------------
    def display_name(self, step_type: Any) -> str:
        if step_type in self._display_names:
            return self._display_names[step_type]

        name = getattr(step_type, "__name__", None) or str(step_type)
        if self._strip_suffix and name.endswith(self._strip_suffix):
            name = name[: -len(self._strip_suffix)]
        return name

    def calculate_name(self, step_type: Any) -> str:
        return self._source.name + self.display_name(step_type)

    # -----------------------------
    # Wiring
    # -----------------------------
    def _binding_for(self, step: Step) -> LazySource:
        return LazySource(
            registry=self._registry,
            step=step,
            source=self._source,
            on_detached=self._on_detached,
        )

    def _on_detached(self, step: Step) -> None:
        name = getattr(step, "name", "?")
        if self.ctx is not None:
            self.ctx.log(step_id=name, level="DEBUG", message="detached step resolved to empty input")

        if self._detached_policy != "warn":
            return

        error = step_detached(step=name)
        if self.ctx is not None:
            self.ctx.add_warning(step_id=name, message=error.message)
        warnings.warn(error.message, DetachedStepWarning, stacklevel=3)

    def _log(self, step: Step, message: str, **extra: Any) -> None:
        if self.ctx is not None:
            self.ctx.log(step_id=step.name, level="INFO", message=message, chain=self._source.name, **extra)

    # -----------------------------
    # Registration
    # -----------------------------
    def materialize(
        self,
        step_type: Any,
        name: Optional[str] = None,
        configure: Optional[Callable[[Step], Any]] = None,
    ) -> Step:
        if name is None:
            name = self.calculate_name(step_type)

        if self._registry.find(name) is not None:
            raise DuplicateNameError(f"Duplicate step name: {name}")

        step = self._factory.construct(step_type, name)
        if getattr(step, "name", None) != name:
            raise ChainConfigurationError(
                message="Fábrica construiu Step com nome diferente do solicitado",
                details={"requested": name, "received": getattr(step, "name", None)},
            )

        self.add(step)

        if configure is not None:
            try:
                configure(step)
            except Exception:
                self._registry.remove(step)
                self._log(step, "step registration rolled back")
                raise

        return step

    def _wire(self, step: Step) -> None:
        # registro é tudo-ou-nada: sem binding, o Step sai da cadeia
        try:
            step.set_input(self._binding_for(step))
        except Exception:
            self._registry.remove(step)
            self._log(step, "step registration rolled back")
            raise

    def add(self, step: Step) -> None:
        self._registry.add(step)
        self._wire(step)
        self._log(step, "step added", index=len(self._registry) - 1)

    def insert(self, index: int, step: Step) -> None:
        self._registry.insert(index, step)
        self._wire(step)
        self._log(step, "step inserted", index=index)

    def remove(self, step: Step) -> bool:
        removed = self._registry.remove(step)
        if removed:
            self._log(step, "step removed")
        return removed

    # -----------------------------
    # Queries
    # -----------------------------
    def index_of(self, step: Step) -> int:
        return self._registry.index_of(step)

    def get(self, index: int) -> Step:
        return self._registry.get(index)

    def find(self, name: str) -> Optional[Step]:
        return self._registry.find(name)

    def names(self) -> List[str]:
        return self._registry.names()

    def list(self) -> List[Step]:
        return self._registry.list()

    def input_of(self, step: Step) -> FileSet:
        return self._binding_for(step).resolve()

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._registry)

    def __contains__(self, step: object) -> bool:
        return step in self._registry

    def __repr__(self) -> str:
        return f"ProcessingChain(source={self._source.name!r}, steps={self.names()!r})"
