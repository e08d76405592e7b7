# -*- coding: utf-8 -*-
"""
Modelos de domínio para o alvo da contagem e configuração de renderização
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from PIL import ImageColor

from ..errors import ConfigError

DEFAULT_PASSED_MESSAGE = "Date has passed!"

# Limites aplicados silenciosamente na construção
WIDTH_BOUNDS = (150, 1000)
HEIGHT_BOUNDS = (150, 500)
FRAME_BOUNDS = (1, 90)

RGB = tuple[int, int, int]


class TimeZoneId(str, Enum):
    """Fusos suportados (identificador curto -> zona IANA)"""

    UK = "uk"
    NL = "nl"
    RU = "ru"

    @property
    def zone_name(self) -> str:
        return _ZONE_NAMES[self]

    @classmethod
    def resolve(cls, value: str | TimeZoneId | None) -> TimeZoneId:
        """Converte o identificador; valores desconhecidos caem para UK"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.UK


_ZONE_NAMES = {
    TimeZoneId.UK: "Europe/London",
    TimeZoneId.NL: "Europe/Amsterdam",
    TimeZoneId.RU: "Europe/Moscow",
}


def clamp(value: int, lower: int, upper: int) -> int:
    """Limita um valor entre mínimo e máximo"""
    return max(lower, min(value, upper))


def parse_color(value: str | RGB) -> RGB:
    """Aceita 'ffe600', '#ffe600' ou uma tupla RGB"""
    if isinstance(value, tuple):
        return value
    text = value if value.startswith("#") else "#" + value
    try:
        return ImageColor.getrgb(text)[:3]
    except ValueError as e:
        raise ConfigError(f"Cor inválida: {value!r}") from e


@dataclass(frozen=True)
class TargetSpec:
    """Alvo da contagem: instante, fuso e mensagem de data passada"""

    target_time: str
    timezone: TimeZoneId = TimeZoneId.UK
    passed_message: str = DEFAULT_PASSED_MESSAGE

    @classmethod
    def create(
        cls,
        target_time: str,
        timezone: str | TimeZoneId | None = "uk",
        passed_message: str | None = None,
    ) -> TargetSpec:
        return cls(
            target_time=target_time,
            timezone=TimeZoneId.resolve(timezone),
            passed_message=passed_message or DEFAULT_PASSED_MESSAGE,
        )


@dataclass(frozen=True)
class RenderConfig:
    """Configuração imutável de uma sessão de renderização"""

    width: int
    height: int
    frame_count: int
    background_color: RGB
    text_color: RGB
    font_family: str = "Courier New"
    output_name: str = "default"

    @classmethod
    def create(
        cls,
        width: int = 640,
        height: int = 80,
        frames: int = 30,
        color: str | RGB = "ffe600",
        bg: str | RGB = "000000",
        name: str = "default",
        font_family: str = "Courier New",
    ) -> RenderConfig:
        """Constrói a configuração aplicando os limites de tamanho e frames"""
        return cls(
            width=clamp(int(width), *WIDTH_BOUNDS),
            height=clamp(int(height), *HEIGHT_BOUNDS),
            frame_count=clamp(int(frames), *FRAME_BOUNDS),
            background_color=parse_color(bg),
            text_color=parse_color(color),
            font_family=font_family,
            output_name=name,
        )

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height
