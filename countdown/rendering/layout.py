# -*- coding: utf-8 -*-
"""
Tabela de layout fixa do frame de contagem (coordenadas em pixels)
"""

from __future__ import annotations
from dataclasses import dataclass

NUMERAL_Y = 60
CAPTION_Y = 100 + (10 / 2)

NUMERAL_PT = 50
CAPTION_PT = 10

COUNTDOWN_FONT_FAMILY = "helvetica"
EMPHASIS_WEIGHT = 800
REGULAR_WEIGHT = 300

DIVIDER_TOP = 15
DIVIDER_BOTTOM = 130
DIVIDER_WIDTH = 2
# cor fixa, independente da cor do texto configurada
DIVIDER_COLOR = (0xFF, 0xE6, 0x00)
DIVIDER_XS = (190, 315, 440)

# a mensagem de data passada escala com a largura do canvas
MESSAGE_WIDTH_DIVISOR = 12


@dataclass(frozen=True)
class FieldSlot:
    """Posição de um grupo numeral + legenda"""

    field: str
    caption: str
    numeral_x: int
    caption_x: int
    weight: int


FIELD_SLOTS = (
    FieldSlot("days", "DAYS", 125, 125, EMPHASIS_WEIGHT),
    FieldSlot("hours", "HOURS", 250, 250, REGULAR_WEIGHT),
    FieldSlot("minutes", "MINUTES", 375, 375, REGULAR_WEIGHT),
    FieldSlot("seconds", "SECONDS", 500, 505, REGULAR_WEIGHT),
)


def points_to_pixels(points: float) -> int:
    """Converte pontos tipográficos em pixels (96 dpi)"""
    return round(points * 96 / 72)
