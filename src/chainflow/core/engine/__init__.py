# src/chainflow/core/engine/__init__.py
"""
Engine do chainflow.

Avalia uma `ProcessingChain` Step a Step, na ordem atual do registry,
resolvendo os bindings de entrada no momento da execução e
consolidando um `RunResult`.

Limites explícitos:
    - Execução estritamente sequencial
    - Não persiste resultados
"""

from .executor import ChainExecutor, RunResult

__all__ = ["ChainExecutor", "RunResult"]
