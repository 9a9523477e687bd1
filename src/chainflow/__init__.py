# src/chainflow/__init__.py
"""
chainflow — cadeias ordenadas de processamento de fontes com entradas adiadas.

Uma cadeia parte de um conjunto de arquivos de origem e encadeia Steps:
o primeiro lê a origem, cada Step seguinte lê a saída do anterior. A
conexão é resolvida apenas quando a entrada é lida, de modo que a
cadeia pode ser alterada livremente antes da execução.

Arquitetura em alto nível:
    - core.pipeline → registry, bindings adiados, cadeia e contratos de Step
    - core.engine   → execução sequencial da cadeia
    - core.config   → carregamento, merge, validação e hashing de configuração

Limites explícitos:
    - Não define transformações concretas de arquivos
    - Não executa Steps em paralelo
    - Não persiste estado da cadeia
"""

from .core.pipeline import (
    DuplicateNameError,
    FileSet,
    IndexOutOfRangeError,
    ProcessingChain,
    SourceSet,
    SourceTask,
)

__all__ = [
    "DuplicateNameError",
    "FileSet",
    "IndexOutOfRangeError",
    "ProcessingChain",
    "SourceSet",
    "SourceTask",
]
