# src/chainflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do chainflow.

As exceções aqui definidas representam violações estruturais da
configuração (arquivos ausentes, formatos desconhecidos, tipos
incompatíveis, valores fora do domínio), e não erros de execução.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de Step ou de binding

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do chainflow.

    Permite captura genérica de falhas de configuração, separadas das
    falhas de montagem da cadeia e de execução.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults declarado não existe.

    Decisões arquiteturais:
        - Um caminho de defaults explícito é obrigatório quando informado
        - O arquivo local de override continua opcional
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um `dict`.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"chain": {"detached_policy": "ignore"}}
        - override: {"chain": "warn"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando uma chave conhecida recebe valor fora do domínio.

    Exemplos:
        - `chain.detached_policy` diferente de "ignore" ou "warn"
        - `engine.fail_fast` que não seja booleano
    """
