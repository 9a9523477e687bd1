# tests/core/config/test_hashing.py
"""
Testes do hash canônico de configuração (compute_config_hash).

Invariantes:
    - A mesma configuração sempre produz o mesmo hash
    - O hash independe da ordem original das chaves
    - Qualquer override efetivo altera o hash
"""
import hashlib
import json

import pytest

from chainflow.core.config.hashing import compute_config_hash
from chainflow.core.config.loader import BUILTIN_DEFAULTS
from chainflow.core.config.merge import deep_merge


def _canonical_json_bytes(obj: dict) -> bytes:
    """Serialização JSON canônica usada como referência nos testes."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def test_hash_is_deterministic():
    a = {"chain": {"strip_suffix": "Task", "detached_policy": "ignore"}, "engine": {"fail_fast": True}}
    b = {"engine": {"fail_fast": True}, "chain": {"detached_policy": "ignore", "strip_suffix": "Task"}}
    assert compute_config_hash(a) == compute_config_hash(b)
    assert len(compute_config_hash(a)) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"chain": {"strip_suffix": "Tarefa"}}
    expected = hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()
    assert compute_config_hash(cfg) == expected


def test_hash_changes_on_override():
    overridden = deep_merge(BUILTIN_DEFAULTS, {"chain": {"detached_policy": "warn"}})
    assert compute_config_hash(overridden) != compute_config_hash(BUILTIN_DEFAULTS)


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["chain"])
