# -*- coding: utf-8 -*-
"""
Hierarquia de erros do gerador de contagem regressiva
"""


class CountdownError(Exception):
    """Erro base do domínio"""


class ParseError(CountdownError, ValueError):
    """Data/hora alvo não pôde ser interpretada no fuso configurado"""

    def __init__(self, value: str, timezone: str):
        super().__init__(f"Data alvo inválida {value!r} (fuso {timezone})")
        self.value = value
        self.timezone = timezone


class SequenceError(CountdownError, RuntimeError):
    """Uso do encoder fora da ordem start -> add_frame* -> finish"""


class OutputError(CountdownError, OSError):
    """Falha ao criar ou escrever o arquivo de saída"""


class GenerationCancelled(CountdownError):
    """Geração interrompida entre dois frames"""


class ConfigError(CountdownError, ValueError):
    """Parâmetro de invocação inválido (ex: cor hex malformada)"""
