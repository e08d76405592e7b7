# -*- coding: utf-8 -*-
"""
Testes unitários para o DurationCalculator
"""

import logging

import pytest

from countdown.domain.errors import ParseError
from countdown.domain.models.frame import Passed, Remaining
from countdown.domain.models.target import DEFAULT_PASSED_MESSAGE, TargetSpec


def test_remaining_duration_in_uk(calculator):
    """Testa diferença positiva (agora fixo: 2025-06-01 13:00 em Londres)"""
    result = calculator.compute(TargetSpec.create("2025-06-02 13:00:30", "uk"))

    assert isinstance(result, Remaining)
    assert result.duration.milliseconds == (24 * 3600 + 30) * 1000


def test_same_wall_clock_differs_between_zones(calculator):
    """Testa que o alvo é localizado no fuso informado"""
    uk = calculator.compute(TargetSpec.create("2025-06-01 15:00", "uk"))
    ru = calculator.compute(TargetSpec.create("2025-06-01 16:00", "ru"))

    # Londres 13:00 (BST), Moscou 15:00 no instante fixo
    assert uk.duration.milliseconds == 2 * 3600 * 1000
    assert ru.duration.milliseconds == 1 * 3600 * 1000


def test_aware_target_is_converted(calculator):
    """Testa alvo com offset explícito"""
    result = calculator.compute(TargetSpec.create("2025-06-01T13:00:00+00:00", "nl"))

    assert result.duration.milliseconds == 3600 * 1000


def test_passed_returns_message(calculator):
    """Testa data passada com mensagem customizada"""
    result = calculator.compute(TargetSpec.create("2000-01-01 00:00", "uk", "Gone!"))

    assert result == Passed("Gone!")


def test_exactly_now_is_passed(calculator):
    """Testa que diferença zero conta como passada"""
    result = calculator.compute(TargetSpec.create("2025-06-01 13:00", "uk"))

    assert result == Passed(DEFAULT_PASSED_MESSAGE)


@pytest.mark.parametrize("value", ["not a date", "", "2099-13-45 00:00"])
def test_invalid_target_raises_parse_error(calculator, value):
    """Testa erro de parse"""
    with pytest.raises(ParseError):
        calculator.compute(TargetSpec.create(value, "uk"))


def test_diagnostic_log_lines(calculator, caplog):
    """Testa as três linhas de diagnóstico"""
    caplog.set_level(logging.INFO, logger="DurationCalculator")

    calculator.compute(TargetSpec.create("2099-01-01 00:00", "uk"))

    messages = [r.getMessage() for r in caplog.records if r.name == "DurationCalculator"]
    assert messages[0] == "Target: 2099-01-01 00:00 Zone: UK"
    assert messages[1] == "Current: 2025-06-01 13:00 Zone: UK"
    assert messages[2].startswith("Difference: ")
    assert len(messages) == 3
