# src/chainflow/core/pipeline/task.py
"""
Base de referência para Steps hospedados e fábrica padrão.

`SourceTask` implementa o contrato `Step` para hospedeiros que não
possuem um sistema de tarefas próprio: guarda o binding recebido da
cadeia, resolve a entrada apenas ao executar e delega a transformação
para `process`, que subclasses implementam.

`TypeFactory` é a fábrica usada quando nenhuma outra é injetada:
constrói o Step chamando `step_type(name)`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .binding import LazySource
from .context import RunContext
from .types import FileSet, StepResult, StepStatus


class SourceTask:
    """Step de referência: lê a entrada adiada, processa e publica a saída."""

    def __init__(self, name: str):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("step.name must be a non-empty string")
        self._name = name
        self._input: Optional[LazySource] = None
        self._output = FileSet.empty(label=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def input(self) -> Optional[LazySource]:
        return self._input

    @property
    def output(self) -> FileSet:
        return self._output

    def set_input(self, source: LazySource) -> None:
        self._input = source

    def source_files(self) -> FileSet:
        if self._input is None:
            return FileSet.empty()
        return self._input.resolve()

    def process(self, files: FileSet) -> FileSet:
        raise NotImplementedError(f"{type(self).__name__} must implement process(files)")

    def metrics(self, files: FileSet, output: FileSet) -> Dict[str, Any]:
        return {"input_files": len(files), "output_files": len(output)}

    def run(self, ctx: RunContext) -> StepResult:
        files = self.source_files()
        output = self.process(files)
        if not isinstance(output, FileSet):
            raise TypeError(f"{type(self).__name__}.process must return FileSet")

        self._output = FileSet(files=output.files, label=self._name)
        ctx.log(
            step_id=self._name,
            level="INFO",
            message="step processed",
            input_files=len(files),
            output_files=len(self._output),
        )

        return StepResult(
            step_name=self._name,
            status=StepStatus.SUCCESS,
            summary=f"processed {len(files)} files into {len(self._output)}",
            input_files=files,
            output_files=self._output,
            metrics=self.metrics(files, self._output),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class TypeFactory:
    """Fábrica padrão: instancia `step_type(name)`."""

    def construct(self, step_type: Any, name: str) -> Any:
        if not callable(step_type):
            raise TypeError(f"step_type deve ser chamável, recebido: {type(step_type).__name__}")
        return step_type(name)
