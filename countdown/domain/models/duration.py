# -*- coding: utf-8 -*-
"""
Duração restante e sua decomposição em dias/horas/minutos/segundos
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


class Duration:
    """Duração com sinal, em milissegundos inteiros (mutável)"""

    __slots__ = ("milliseconds",)

    def __init__(self, milliseconds: int):
        self.milliseconds = int(milliseconds)

    def subtract_seconds(self, seconds: int) -> Duration:
        self.milliseconds -= seconds * MS_PER_SECOND
        return self

    @property
    def is_elapsed(self) -> bool:
        return self.milliseconds <= 0

    def as_days(self) -> int:
        return self.milliseconds // MS_PER_DAY

    def as_hours(self) -> int:
        return self.milliseconds // MS_PER_HOUR

    def as_minutes(self) -> int:
        return self.milliseconds // MS_PER_MINUTE

    def as_seconds(self) -> int:
        return self.milliseconds // MS_PER_SECOND

    def humanize(self) -> str:
        """Representação legível, ex: '3 days, 4:05:06'"""
        return str(timedelta(milliseconds=self.milliseconds))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.milliseconds == other.milliseconds

    def __repr__(self) -> str:
        return f"Duration({self.milliseconds})"


@dataclass(frozen=True)
class FieldSet:
    """Campos exclusivos de uma duração (sem dupla contagem)"""

    days: int
    hours: int
    minutes: int
    seconds: int

    @staticmethod
    def pad(value: int) -> str:
        # largura mínima 2, sem truncar valores maiores
        return f"{value:02d}"

    @property
    def days_text(self) -> str:
        return self.pad(self.days)

    @property
    def hours_text(self) -> str:
        return self.pad(self.hours)

    @property
    def minutes_text(self) -> str:
        return self.pad(self.minutes)

    @property
    def seconds_text(self) -> str:
        return self.pad(self.seconds)

    def total_seconds(self) -> int:
        return self.days * 86400 + self.hours * 3600 + self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return (
            f"{self.days_text}d {self.hours_text}h "
            f"{self.minutes_text}m {self.seconds_text}s"
        )


def decompose(duration: Duration) -> FieldSet:
    """Converte a duração em campos inteiros dias/horas/minutos/segundos"""
    if duration.milliseconds < 0:
        raise ValueError(f"Duração negativa não pode ser decomposta: {duration!r}")

    days = duration.as_days()
    hours = duration.as_hours() - days * 24
    minutes = duration.as_minutes() - days * 24 * 60 - hours * 60
    seconds = (
        duration.as_seconds() - days * 86400 - hours * 3600 - minutes * 60
    )
    return FieldSet(days=days, hours=hours, minutes=minutes, seconds=seconds)


def decrement(duration: Duration, seconds: int = 1) -> Duration:
    """Subtrai segundos inteiros da duração (in place)"""
    if seconds < 0:
        raise ValueError("seconds deve ser >= 0")
    return duration.subtract_seconds(seconds)
