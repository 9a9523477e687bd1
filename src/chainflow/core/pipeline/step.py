# src/chainflow/core/pipeline/step.py
"""
Contratos canônicos de Step e de fábrica de Steps do chainflow.

Um Step é a menor unidade de processamento da cadeia: possui um nome
único, recebe uma entrada adiada (`LazySource`) e expõe uma saída
(`FileSet`) depois de executado.

A cadeia nunca instancia Steps diretamente: a construção é delegada a
uma fábrica injetada (`StepFactory`), o que mantém o core independente
de qualquer sistema de tarefas hospedeiro.

Princípios fundamentais:
    - Steps não conhecem seus vizinhos na cadeia
    - A entrada é sempre adiada, nunca um valor concreto
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - `name` é único na cadeia e imutável após atribuído
    - `output` é somente leitura do ponto de vista da cadeia

Limites explícitos:
    - Não define semântica de transformação de arquivos
    - Não decide ordem de execução
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .context import RunContext
from .types import FileSet, StepResult

if TYPE_CHECKING:
    from .binding import LazySource


@runtime_checkable
class Step(Protocol):
    """
    Contrato mínimo de um Step da cadeia.

    Atributos obrigatórios:
        - name: identificador único e estável do Step
        - output: conjunto de arquivos produzido (vazio antes de executar)

    Operações obrigatórias:
        - set_input(source): recebe a entrada adiada da cadeia
        - run(ctx): executa o Step uma vez e retorna um `StepResult`

    Decisões arquiteturais:
        - O protocolo não impõe herança, apenas conformidade estrutural
        - A resolução da entrada é responsabilidade do próprio Step,
          no momento em que ele é executado
    """
    name: str

    @property
    def output(self) -> FileSet:
        ...

    def set_input(self, source: "LazySource") -> None:
        ...

    def run(self, ctx: RunContext) -> StepResult:
        """Executa o Step uma única vez, lendo a entrada via binding."""
        ...


@runtime_checkable
class StepFactory(Protocol):
    """
    Capacidade injetada de construção de Steps.

    Dado um tipo e um nome, o hospedeiro constrói a unidade executável
    correspondente. A cadeia apenas registra e conecta o resultado.
    """

    def construct(self, step_type: Any, name: str) -> Step:
        ...
