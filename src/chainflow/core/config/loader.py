# src/chainflow/core/config/loader.py
"""
Loader canônico de configuração do chainflow.

A configuração efetiva é resolvida em camadas, sempre por deep-merge:
    1. defaults embutidos (`BUILTIN_DEFAULTS`)
    2. arquivo de defaults do projeto (opcional; obrigatório se informado)
    3. arquivo local de overrides (opcional; ignorado se ausente)

Chaves consumidas pelo core:
    - chain.strip_suffix     → sufixo removido do nome do tipo do Step
    - chain.detached_policy  → "ignore" | "warn"
    - engine.fail_fast       → interrompe o executor na primeira falha

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - A configuração retornada sempre passa por `validate_config`

Limites explícitos:
    - Não persiste configuração ou hash
    - Não interage com a cadeia ou com Steps
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)

BUILTIN_DEFAULTS: Dict[str, Any] = {
    "chain": {
        "strip_suffix": "Task",
        "detached_policy": "ignore",
    },
    "engine": {
        "fail_fast": True,
    },
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo YAML ou JSON e valida que a raiz é um `dict`.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    chain_cfg = config.get("chain", {}) or {}
    engine_cfg = config.get("engine", {}) or {}

    policy = chain_cfg.get("detached_policy", "ignore")
    if policy not in ("ignore", "warn"):
        raise InvalidConfigValueError(
            f"chain.detached_policy deve ser 'ignore' ou 'warn', recebido: {policy!r}"
        )

    suffix = chain_cfg.get("strip_suffix", "Task")
    if not isinstance(suffix, str):
        raise InvalidConfigValueError(
            f"chain.strip_suffix deve ser str, recebido: {type(suffix).__name__}"
        )

    fail_fast = engine_cfg.get("fail_fast", True)
    if not isinstance(fail_fast, bool):
        raise InvalidConfigValueError(
            f"engine.fail_fast deve ser bool, recebido: {type(fail_fast).__name__}"
        )

    return config


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva da cadeia.

    Args:
        defaults_path (Optional[str]): Arquivo de defaults do projeto.
        local_path (Optional[str]): Arquivo opcional de overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida e validada.

    Raises:
        DefaultsNotFoundError: Se `defaults_path` for informado e não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        InvalidConfigValueError: Se uma chave conhecida tiver valor inválido.
    """
    effective = deep_merge(BUILTIN_DEFAULTS, {})

    if defaults_path is not None:
        effective = deep_merge(effective, _load_file(Path(defaults_path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return validate_config(effective)
