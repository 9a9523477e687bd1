# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- sem arquivos, a configuração efetiva são os defaults embutidos
- um arquivo de defaults declarado é obrigatório
- o arquivo local é opcional e tem prioridade
- formatos e estruturas inválidas são rejeitados cedo
- valores fora do domínio das chaves conhecidas são rejeitados
"""
import json
from pathlib import Path

import pytest

try:
    from chainflow.core.config.loader import BUILTIN_DEFAULTS, load_config
    from chainflow.core.config.errors import (
        ConfigTypeConflictError,
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        InvalidConfigValueError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader. Implement:\n"
            "- src/chainflow/core/config/loader.py (load_config)\n"
            "- src/chainflow/core/config/errors.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_builtin_defaults_only():
    _require_imports()
    cfg = load_config()
    assert cfg == BUILTIN_DEFAULTS
    assert cfg is not BUILTIN_DEFAULTS


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que um arquivo de defaults declarado e ausente é erro fatal.
    """
    _require_imports()
    missing = tmp_path / "defaults.yaml"
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(missing))


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))

    assert cfg["chain"]["detached_policy"] == "ignore"
    assert cfg["engine"]["fail_fast"] is True


def test_load_defaults_and_local(tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml):
    """
    Verifica a precedência do override local sobre os defaults.

    Invariantes:
        - Chaves sobrescritas refletem o local
        - Chaves não sobrescritas são preservadas
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults), local_path=str(local))

    assert cfg["chain"]["detached_policy"] == "warn"
    assert cfg["chain"]["strip_suffix"] == "Task"
    assert cfg["engine"]["fail_fast"] is False


def test_local_over_builtin_without_project_defaults(tmp_path: Path):
    _require_imports()
    local = tmp_path / "local.json"
    local.write_text(json.dumps({"chain": {"strip_suffix": "Job"}}), encoding="utf-8")

    cfg = load_config(local_path=str(local))

    assert cfg["chain"]["strip_suffix"] == "Job"
    assert cfg["chain"]["detached_policy"] == "ignore"


def test_empty_file_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yml"
    defaults.write_text("", encoding="utf-8")
    assert load_config(defaults_path=str(defaults)) == BUILTIN_DEFAULTS


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("[chain]\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


@pytest.mark.parametrize(
    "override, expected",
    [
        ({"chain": {"detached_policy": "explode"}}, "InvalidConfigValueError"),
        ({"engine": {"fail_fast": "yes"}}, "ConfigTypeConflictError"),
        ({"chain": {"strip_suffix": 3}}, "ConfigTypeConflictError"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, override, expected):
    _require_imports()
    local = tmp_path / "local.json"
    local.write_text(json.dumps(override), encoding="utf-8")
    errors = {
        "InvalidConfigValueError": InvalidConfigValueError,
        "ConfigTypeConflictError": ConfigTypeConflictError,
    }
    with pytest.raises(errors[expected]):
        load_config(local_path=str(local))


def test_validate_config_rejects_bad_values_directly():
    _require_imports()
    from chainflow.core.config.loader import validate_config

    with pytest.raises(InvalidConfigValueError):
        validate_config({"engine": {"fail_fast": 1}})
    assert validate_config({}) == {}
