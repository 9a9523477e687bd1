# src/chainflow/core/__init__.py
"""
Core do chainflow.

Componentes principais:
    - pipeline → registry nomeado, bindings adiados e cadeia de processamento
    - engine   → avaliação sequencial da cadeia e consolidação de resultados
    - config   → resolução de configuração (merge, validação, hashing)
    - errors / exceptions → payloads e exceções tipadas

Princípios fundamentais:
    - Ordem do registry é a única fonte do fluxo de dados
    - Entradas são resolvidas no momento da leitura, nunca na montagem
    - Step desanexado degrada para vazio em vez de falhar
"""
