# tests/conftest.py
"""
Fixtures compartilhados para testes do chainflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas
- contexto de execução controlado (RunContext)
- origem canônica da cadeia (`main` com `a.js`)
- Step dummy duck-typed para testes estruturais

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Steps dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa a cadeia
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao uso real de um projeto.

    Returns:
        str: Conteúdo YAML representando configuração padrão.
    """

    return """\
chain:
  strip_suffix: Task
  detached_policy: ignore
engine:
  fail_fast: true
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de override local: apenas as chaves que mudam.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """

    return """\
chain:
  detached_policy: warn
engine:
  fail_fast: false
"""


@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima e já resolvida para testes da cadeia e do executor.

    Returns:
        dict: Configuração mínima e válida.
    """
    return {
        "chain": {"strip_suffix": "Task", "detached_policy": "ignore"},
        "engine": {"fail_fast": True},
    }


# =====================================================
# Pipeline fixtures (RunContext + SourceSet + Step)
# =====================================================

@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos para garantir reprodutibilidade.

    Returns:
        RunContext: Contexto de execução isolado e previsível.
    """
    from chainflow.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def main_source():
    """
    Origem canônica dos testes: cadeia `main` com um único arquivo `a.js`.

    Returns:
        SourceSet: Origem nomeada `main`.
    """
    from chainflow.core.pipeline.types import FileSet, SourceSet

    return SourceSet(name="main", files=FileSet.of("a.js", label="main"))


@pytest.fixture
def DummyStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Step.

    A classe retornada:
    - expõe `name`, `output` e `set_input`
    - guarda o binding recebido sem resolvê-lo
    - em `run(ctx)`, resolve a entrada e publica como saída os arquivos
      lidos acrescidos de `<name>.out`

    Decisões arquiteturais:
        - O Step é definido localmente para evitar acoplamento com Steps reais
        - A saída identifica o Step que a produziu, facilitando asserts de fluxo

    Returns:
        type: Classe _DummyStep que pode ser instanciada pelos testes.
    """
    from chainflow.core.pipeline.types import FileSet, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, name: str = "mainDummy"):
            self.name = name
            self.binding = None
            self._output = FileSet.empty()
            self.runs = 0

        @property
        def output(self):
            return self._output

        def set_input(self, source):
            self.binding = source

        def run(self, ctx):
            self.runs += 1
            files = self.binding.resolve() if self.binding is not None else FileSet.empty()
            self._output = files.union([f"{self.name}.out"])
            ctx.log(step_id=self.name, level="INFO", message="dummy ok")
            return StepResult(
                step_name=self.name,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
                input_files=files,
                output_files=self._output,
            )

    return _DummyStep
