# src/chainflow/core/pipeline/__init__.py
"""
# Pipeline Core — chainflow

Este pacote define os contratos e as estruturas fundamentais de uma
cadeia de processamento no chainflow.

Uma cadeia é uma **lista ordenada e mutável de Steps**, onde:
- a posição de cada Step define de onde vêm seus arquivos
- a entrada de cada Step é resolvida apenas quando lida
- inserções e remoções redirecionam o fluxo automaticamente

## Componentes

- **types**: `FileSet`, `SourceSet`, `StepStatus`, `StepResult`
- **step**: `Step` e `StepFactory` (Protocols)
- **registry**: `NamedRegistry`, `DuplicateNameError`, `IndexOutOfRangeError`
- **binding**: `LazySource`, `DetachedStepWarning`
- **chain**: `ProcessingChain`
- **task**: `SourceTask`, `TypeFactory`
- **context**: `RunContext`

## Invariantes

- Cada Step possui um `name` único na cadeia
- Step desanexado resolve entrada vazia, nunca erro
"""

from .binding import DetachedStepWarning, LazySource
from .chain import ProcessingChain
from .context import RunContext
from .registry import NOT_FOUND, DuplicateNameError, IndexOutOfRangeError, NamedRegistry
from .step import Step, StepFactory
from .task import SourceTask, TypeFactory
from .types import FileSet, SourceSet, StepResult, StepStatus

__all__ = [
    "DetachedStepWarning",
    "DuplicateNameError",
    "FileSet",
    "IndexOutOfRangeError",
    "LazySource",
    "NOT_FOUND",
    "NamedRegistry",
    "ProcessingChain",
    "RunContext",
    "SourceSet",
    "SourceTask",
    "Step",
    "StepFactory",
    "StepResult",
    "StepStatus",
    "TypeFactory",
]
