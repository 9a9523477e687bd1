# src/chainflow/core/config/__init__.py

"""
Camada de configuração do chainflow.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (YAML/JSON)
    - Resolução da configuração final via deep-merge determinístico
    - Validação das chaves consumidas pela cadeia e pelo executor
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não monta cadeias
    - Não executa Steps
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import BUILTIN_DEFAULTS, load_config, validate_config
from .merge import deep_merge

__all__ = [
    "BUILTIN_DEFAULTS",
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "validate_config",
]
