# src/chainflow/core/pipeline/binding.py
"""
Binding adiado de entrada de um Step.

Este módulo define o `LazySource`, a computação adiada que responde
"qual conjunto de arquivos deve alimentar este Step agora".

O binding é criado no momento em que o Step entra na cadeia, mas só é
avaliado quando a entrada é lida (tipicamente durante a execução). A
cada avaliação a posição do Step é recalculada a partir do registry,
de modo que inserções e remoções feitas depois do registro redirecionam
o fluxo sem que nenhum Step precise conhecer seus vizinhos.

Algoritmo de resolução:
    1. localizar o Step no registry por identidade (`index_of`)
    2. não encontrado → FileSet vazio (Step desanexado, não contribui)
    3. posição 0      → arquivos da origem da cadeia
    4. posição i      → `output` do Step na posição i - 1

Decisões arquiteturais:
    - O binding guarda a identidade do Step, nunca sua posição nem
      uma referência ao predecessor
    - Step desanexado não é erro: a resolução degrada para vazio e
      apenas notifica o callback opcional `on_detached`

Invariantes:
    - Construir um binding não executa nenhuma resolução
    - Resolver não altera o registry

Limites explícitos:
    - Não executa Steps
    - Não decide política de avisos (delegada ao callback)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .registry import NOT_FOUND, NamedRegistry
from .step import Step
from .types import FileSet, SourceSet


class DetachedStepWarning(UserWarning):
    """
    Aviso diagnóstico emitido quando um Step desanexado resolve sua entrada.

    Não é erro: a resolução continua retornando um FileSet vazio. O aviso
    só é emitido quando a política da cadeia solicita (`detached_policy`).
    """


@dataclass(frozen=True)
class LazySource:
    """
    Entrada adiada de um Step, resolvida contra o estado atual da cadeia.

    Pode ser chamada diretamente (`binding()`) ou via `resolve()`.
    """

    registry: NamedRegistry = field(repr=False, compare=False)
    step: Step
    source: SourceSet = field(repr=False, compare=False)
    on_detached: Optional[Callable[[Step], None]] = field(default=None, repr=False, compare=False)

    def resolve(self) -> FileSet:
        index = self.registry.index_of(self.step)
        if index == NOT_FOUND:
            if self.on_detached is not None:
                self.on_detached(self.step)
            return FileSet.empty()
        if index == 0:
            return self.source.files
        return self.registry.get(index - 1).output

    def __call__(self) -> FileSet:
        return self.resolve()

    @property
    def is_attached(self) -> bool:
        return self.registry.index_of(self.step) != NOT_FOUND
