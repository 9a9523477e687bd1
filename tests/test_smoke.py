# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do chainflow.

Garante que o pacote pode ser importado e que os símbolos públicos
principais estão expostos no namespace raiz.

Limites explícitos:
    - Não testar lógica de cadeia ou execução
"""


def test_smoke():
    import chainflow

    for name in ("ProcessingChain", "SourceSet", "FileSet", "SourceTask", "DuplicateNameError"):
        assert hasattr(chainflow, name)
