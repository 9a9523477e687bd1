# src/chainflow/core/pipeline/types.py
"""
Tipos canônicos da cadeia de processamento do chainflow.

Este módulo define as estruturas de valor que circulam entre a cadeia,
os Steps e o executor:
    - conjuntos de arquivos (entrada e saída de Steps)
    - o conjunto de origem da cadeia
    - estados finais de execução
    - resultado imutável produzido por um Step

Componentes principais:
    - FileSet    → conjunto ordenado e imutável de caminhos de arquivo
    - SourceSet  → origem nomeada da cadeia (prefixo de nomes + arquivos)
    - StepStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - StepResult → estrutura imutável de resultado de execução

Princípios fundamentais:
    - Tipos são valores: comparáveis, imutáveis e serializáveis
    - Nenhuma lógica de roteamento vive neste módulo
    - O "sem resultado" é representado por um FileSet vazio, nunca por None

Invariantes:
    - Um FileSet nunca contém o mesmo caminho duas vezes
    - A ordem de inserção dos caminhos é preservada
    - StepResult é imutável após criado

Limites explícitos:
    - Não acessa filesystem
    - Não resolve bindings
    - Não executa Steps
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class FileSet:
    """
    Conjunto ordenado e imutável de caminhos de arquivo.

    Representa tanto a origem da cadeia quanto a saída de um Step. O
    conjunto vazio é o valor canônico de "nenhum resultado", usado quando
    um Step desanexado resolve sua entrada.

    Decisões arquiteturais:
        - Caminhos são strings opacas (sem normalização de filesystem)
        - Duplicatas são descartadas mantendo a primeira ocorrência
        - `label` é apenas informativo e não participa da igualdade

    Invariantes:
        - `files` é sempre uma tupla sem duplicatas
        - Instâncias nunca são alteradas após criadas
    """

    files: Tuple[str, ...] = ()
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        seen = set()
        unique: List[str] = []
        for f in self.files:
            if not isinstance(f, str):
                raise TypeError(f"FileSet aceita apenas caminhos str, recebido: {type(f).__name__}")
            if f not in seen:
                seen.add(f)
                unique.append(f)
        object.__setattr__(self, "files", tuple(unique))

    @classmethod
    def of(cls, *files: str, label: Optional[str] = None) -> "FileSet":
        return cls(files=tuple(files), label=label)

    @classmethod
    def empty(cls, label: Optional[str] = None) -> "FileSet":
        return cls(files=(), label=label)

    @property
    def is_empty(self) -> bool:
        return not self.files

    def union(self, other: Iterable[str]) -> "FileSet":
        return FileSet(files=self.files + tuple(other), label=self.label)

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, item: object) -> bool:
        return item in self.files


@dataclass(frozen=True)
class SourceSet:
    """
    Origem nomeada de uma cadeia de processamento.

    O `name` é usado como prefixo na geração determinística de nomes de
    Steps (ex.: origem `main` + tipo `MinifyTask` → `mainMinify`). Os
    arquivos alimentam o primeiro Step da cadeia.

    Invariantes:
        - `name` é uma string não vazia
        - A origem não muda durante a vida da cadeia
    """

    name: str
    files: FileSet = field(default_factory=FileSet)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("source.name must be a non-empty string")


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um Step.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: execução pulada (predecessor sem sucesso)
        - FAILED: execução interrompida por erro

    Os valores são strings para facilitar serialização em JSON.
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_name: nome único do Step na cadeia
        - status: estado final da execução
        - summary: resumo textual curto
        - input_files: arquivos efetivamente lidos pelo Step
        - output_files: arquivos produzidos pelo Step
        - metrics: métricas numéricas livres
        - warnings: avisos não fatais
        - payload: dados adicionais (ex.: `payload["error"]` em falhas)

    Invariantes:
        - Uma instância nunca é alterada após criada
        - `step_name` e `status` estão sempre presentes
    """
    step_name: str
    status: StepStatus
    summary: str
    input_files: FileSet = field(default_factory=FileSet)
    output_files: FileSet = field(default_factory=FileSet)
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)
