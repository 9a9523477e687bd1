# tests/core/pipeline/test_step_protocol.py
"""
Testes de conformidade com os protocolos `Step` e `StepFactory`.

Steps e fábricas são verificados por duck typing (@runtime_checkable):
não há herança obrigatória.
"""
import pytest

from chainflow.core.pipeline.step import Step, StepFactory
from chainflow.core.pipeline.task import SourceTask, TypeFactory
from chainflow.core.pipeline.types import FileSet, StepResult, StepStatus
from tests.fixtures.steps.minify import MinifyTask


def test_dummy_step_satisfies_protocol(DummyStep, dummy_ctx):
    """
    Verifica que o Step dummy satisfaz o protocolo e retorna StepResult.
    """
    step = DummyStep(name="mainDummy")
    assert isinstance(step, Step)
    result = step.run(dummy_ctx)
    assert isinstance(result, StepResult)
    assert result.status == StepStatus.SUCCESS
    assert result.output_files == FileSet.of("mainDummy.out")


def test_source_task_satisfies_protocol():
    assert isinstance(MinifyTask("mainMinify"), Step)


def test_type_factory_satisfies_protocol():
    factory = TypeFactory()
    assert isinstance(factory, StepFactory)
    step = factory.construct(MinifyTask, "mainMinify")
    assert isinstance(step, MinifyTask)
    assert step.name == "mainMinify"


def test_type_factory_rejects_non_callable():
    with pytest.raises(TypeError):
        TypeFactory().construct("minify", "mainMinify")


def test_unbound_source_task_reads_nothing(dummy_ctx):
    step = MinifyTask("mainMinify")
    assert step.input is None
    assert step.source_files().is_empty
    result = step.run(dummy_ctx)
    assert result.output_files.is_empty
    assert result.metrics == {"input_files": 0, "output_files": 0}


def test_source_task_requires_process(dummy_ctx):
    with pytest.raises(NotImplementedError):
        SourceTask("bare").run(dummy_ctx)
