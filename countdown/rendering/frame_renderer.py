# -*- coding: utf-8 -*-
"""
countdown/rendering/frame_renderer.py
Desenho dos frames da contagem regressiva com Pillow
"""

from typing import Optional

from PIL import Image, ImageDraw

from ..domain.models.duration import FieldSet
from ..domain.models.frame import Frame
from ..domain.models.target import RenderConfig
from ..infra.logging import get_logger
from . import layout
from .fonts import FontBook


class FrameRenderer:
    """
    Renderiza frames sobre um único canvas RGB reaproveitado

    O canvas é limpo com a cor de fundo e repintado a cada frame; cada
    Frame devolvido carrega uma cópia dos pixels, então o canvas pode ser
    sobrescrito logo em seguida.
    """

    def __init__(self, config: RenderConfig, fonts: Optional[FontBook] = None):
        self.logger = get_logger("FrameRenderer")
        self.config = config
        self.fonts = fonts or FontBook()
        self.canvas = Image.new("RGB", config.size, config.background_color)
        self.draw = ImageDraw.Draw(self.canvas)

    def clear(self):
        """Pinta o canvas inteiro com a cor de fundo"""
        self.draw.rectangle(
            (0, 0, self.config.width, self.config.height),
            fill=self.config.background_color,
        )

    def render_countdown_frame(self, fields: FieldSet) -> Frame:
        """Desenha os quatro grupos (DAYS, HOURS, MINUTES, SECONDS) e divisores"""
        self.clear()

        numeral_px = layout.points_to_pixels(layout.NUMERAL_PT)
        caption_px = layout.points_to_pixels(layout.CAPTION_PT)

        for index, slot in enumerate(layout.FIELD_SLOTS):
            if index > 0:
                self._draw_divider(layout.DIVIDER_XS[index - 1])

            numeral_font = self.fonts.get(layout.COUNTDOWN_FONT_FAMILY, slot.weight, numeral_px)
            caption_font = self.fonts.get(layout.COUNTDOWN_FONT_FAMILY, slot.weight, caption_px)
            value = getattr(fields, f"{slot.field}_text")

            self._draw_text(value, slot.numeral_x, layout.NUMERAL_Y, numeral_font)
            self._draw_text(slot.caption, slot.caption_x, layout.CAPTION_Y, caption_font)

        self.logger.info("string: %s", fields)
        return self._snapshot("countdown", fields=fields)

    def render_message_frame(self, message: str) -> Frame:
        """Desenha uma única mensagem centralizada no canvas"""
        self.clear()

        size_px = self.config.width // layout.MESSAGE_WIDTH_DIVISOR
        font = self.fonts.get(self.config.font_family, 400, size_px)
        self._draw_text(message, self.config.width / 2, self.config.height / 2, font)

        return self._snapshot("message", message=message)

    def _draw_text(self, text: str, x: float, y: float, font):
        self.draw.text((x, y), text, fill=self.config.text_color, font=font, anchor="mm")

    def _draw_divider(self, x: int):
        self.draw.line(
            [(x, layout.DIVIDER_TOP), (x, layout.DIVIDER_BOTTOM)],
            fill=layout.DIVIDER_COLOR,
            width=layout.DIVIDER_WIDTH,
        )

    def _snapshot(self, kind: str, fields=None, message=None) -> Frame:
        return Frame(
            width=self.config.width,
            height=self.config.height,
            kind=kind,
            pixels=self.canvas.tobytes(),
            fields=fields,
            message=message,
        )
