# src/chainflow/core/pipeline/registry.py
"""
Registro estrutural e ordenado de Steps da cadeia.

Este módulo define o `NamedRegistry`, responsável por manter os Steps de
uma cadeia em ordem e garantir a unicidade de seus nomes.

A ordem do registry é a única fonte do fluxo de dados: o Step na
posição 0 lê a origem da cadeia e cada Step seguinte lê a saída do
Step imediatamente anterior. O registry, porém, não calcula esse fluxo;
ele apenas responde onde cada Step está agora.

Responsabilidades do módulo:
    - Validar unicidade de `step.name`
    - Preservar e expor a ordem atual dos Steps
    - Localizar Steps por identidade, posição e nome

Decisões arquiteturais:
    - Armazenamento por nome separado da lista de ordem
    - Pertencimento é verificado por identidade do objeto registrado
      sob o nome, não apenas pelo nome
    - Erros estruturais são síncronos e não alteram o estado

Invariantes:
    - Cada Step registrado possui um `name` único
    - A lista de ordem contém exatamente os nomes armazenados
    - Uma falha de registro nunca deixa estado parcial

Limites explícitos:
    - Não resolve entradas nem saídas de Steps
    - Não executa Steps
    - Não interage com RunContext
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .step import Step

NOT_FOUND = -1


class DuplicateNameError(ValueError):
    """
    Exceção levantada quando um nome de Step já está em uso no registry.

    Decisões arquiteturais:
        - Nomes de Step são únicos na cadeia
        - A colisão é tratada como erro fatal daquela chamada de registro
        - O registry permanece exatamente como estava antes da chamada

    Limites explícitos:
        - Não tenta renomear Steps automaticamente
    """


class IndexOutOfRangeError(IndexError):
    """
    Exceção levantada ao consultar ou inserir em uma posição inexistente.

    Representa erro de programação do chamador; posições negativas
    também são consideradas fora do intervalo.
    """


@dataclass
class NamedRegistry:
    """
    Coleção ordenada de Steps indexada por nome.

    Decisões arquiteturais:
        - `index_of` retorna `NOT_FOUND` em vez de levantar exceção, pois
          consultar um Step removido é um padrão suportado
        - Um objeto diferente registrado sob o mesmo nome é outra
          identidade: `index_of` e `remove` não o confundem com o antigo

    Invariantes:
        - `names()` reflete exatamente a ordem atual
        - `index_of` é puro: sem mutação, o resultado não muda

    Limites explícitos:
        - Não conecta entradas (ver `LazySource`)
        - Não é seguro para mutação concorrente
    """

    _steps: Dict[str, Step] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def _validate_new(self, step: Step) -> str:
        name = getattr(step, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("step.name must be a non-empty string")

        if name in self._steps:
            raise DuplicateNameError(f"Duplicate step name: {name}")

        return name

    def add(self, step: Step) -> None:
        name = self._validate_new(step)
        self._steps[name] = step
        self._order.append(name)

    def insert(self, index: int, step: Step) -> None:
        if not 0 <= index <= len(self._order):
            raise IndexOutOfRangeError(
                f"Insert index {index} out of range for registry of size {len(self._order)}"
            )
        name = self._validate_new(step)
        self._steps[name] = step
        self._order.insert(index, name)

    def remove(self, step: Step) -> bool:
        if self.index_of(step) == NOT_FOUND:
            return False
        name = step.name
        del self._steps[name]
        self._order.remove(name)
        return True

    def index_of(self, step: Step) -> int:
        name = getattr(step, "name", None)
        if self._steps.get(name) is not step:
            return NOT_FOUND
        return self._order.index(name)

    def get(self, index: int) -> Step:
        if not 0 <= index < len(self._order):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for registry of size {len(self._order)}"
            )
        return self._steps[self._order[index]]

    def find(self, name: str) -> Optional[Step]:
        return self._steps.get(name)

    def names(self) -> List[str]:
        return list(self._order)

    def list(self) -> List[Step]:
        return [self._steps[n] for n in self._order]

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.list())

    def __contains__(self, step: object) -> bool:
        return self.index_of(step) != NOT_FOUND  # type: ignore[arg-type]
