# -*- coding: utf-8 -*-
"""
Testes unitários para Duration, FieldSet e decomposição
"""

import pytest

from countdown.domain.models.duration import (
    MS_PER_DAY,
    MS_PER_HOUR,
    Duration,
    FieldSet,
    decompose,
    decrement,
)

SAMPLE_DURATIONS = [
    0,
    999,
    1000,
    59_999,
    60_000,
    MS_PER_HOUR - 1,
    MS_PER_HOUR,
    MS_PER_DAY - 1,
    MS_PER_DAY,
    MS_PER_DAY + 1,
    3 * MS_PER_DAY + 4 * MS_PER_HOUR + 5 * 60_000 + 6_789,
    125 * MS_PER_DAY + 23 * MS_PER_HOUR + 59 * 60_000 + 59_999,
]


@pytest.mark.parametrize("ms", SAMPLE_DURATIONS)
def test_decompose_fields_sum_to_total_seconds(ms):
    """Testa que os campos somam floor(ms/1000) e respeitam os intervalos"""
    fields = decompose(Duration(ms))

    assert fields.total_seconds() == ms // 1000
    assert 0 <= fields.hours <= 23
    assert 0 <= fields.minutes <= 59
    assert 0 <= fields.seconds <= 59
    assert fields.days >= 0


def test_decompose_exact_day_boundary():
    """Testa que exatamente um dia não gera off-by-one"""
    fields = decompose(Duration(MS_PER_DAY))

    assert fields == FieldSet(days=1, hours=0, minutes=0, seconds=0)


def test_decompose_mixed_units():
    """Testa decomposição com todas as unidades"""
    ms = 3 * MS_PER_DAY + 4 * MS_PER_HOUR + 5 * 60_000 + 6_789
    fields = decompose(Duration(ms))

    assert (fields.days, fields.hours, fields.minutes, fields.seconds) == (3, 4, 5, 6)


def test_decompose_negative_raises():
    """Testa que duração negativa não é decomposta"""
    with pytest.raises(ValueError):
        decompose(Duration(-1))


def test_field_padding():
    """Testa largura mínima 2 sem truncar"""
    fields = FieldSet(days=125, hours=5, minutes=0, seconds=59)

    assert fields.days_text == "125"
    assert fields.hours_text == "05"
    assert fields.minutes_text == "00"
    assert fields.seconds_text == "59"
    assert str(fields) == "125d 05h 00m 59s"


@pytest.mark.parametrize("n", [0, 1, 59, 60, 3600, 86_399, 86_400])
def test_decrement_matches_direct_decomposition(n):
    """Testa n decrementos contra uma decomposição direta de (D - n s)"""
    original = 2 * MS_PER_DAY + 500
    duration = Duration(original)

    for _ in range(n):
        decrement(duration, 1)

    assert duration.milliseconds == original - n * 1000
    assert decompose(duration) == decompose(Duration(original - n * 1000))


def test_decrement_by_many_seconds_at_once():
    """Testa decremento em bloco"""
    duration = Duration(10_000)

    result = decrement(duration, 4)

    assert result is duration
    assert duration.milliseconds == 6_000


def test_decrement_negative_seconds_raises():
    """Testa que decremento negativo é rejeitado"""
    with pytest.raises(ValueError):
        decrement(Duration(10_000), -1)


def test_duration_elapsed_flag():
    """Testa transição para o estado passado em zero"""
    duration = Duration(1_000)
    assert not duration.is_elapsed

    decrement(duration, 1)
    assert duration.is_elapsed
