# -*- coding: utf-8 -*-
"""
Resolução de fontes TrueType por família e peso
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from PIL import ImageFont

from ..infra.logging import get_logger

BOLD_THRESHOLD = 600

# candidatos por família: (regular, negrito)
FAMILY_CANDIDATES = {
    "helvetica": (
        ["Helvetica.ttf", "Arial.ttf", "arial.ttf", "LiberationSans-Regular.ttf", "DejaVuSans.ttf"],
        ["Helvetica-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf", "LiberationSans-Bold.ttf", "DejaVuSans-Bold.ttf"],
    ),
    "courier new": (
        ["Courier New.ttf", "cour.ttf", "LiberationMono-Regular.ttf", "DejaVuSansMono.ttf"],
        ["Courier New Bold.ttf", "courbd.ttf", "LiberationMono-Bold.ttf", "DejaVuSansMono-Bold.ttf"],
    ),
}


class FontBook:
    """Carrega e mantém em cache as fontes usadas pelo renderer"""

    def __init__(self, font_dir: Optional[str] = None):
        self.logger = get_logger("FontBook")
        self.font_dir = Path(font_dir) if font_dir else None
        self.get = lru_cache(maxsize=32)(self._load)

    def candidates(self, family: str, weight: int) -> list[str]:
        regular, bold = FAMILY_CANDIDATES.get(
            family.lower(), ([f"{family}.ttf"], [f"{family} Bold.ttf", f"{family}-Bold.ttf"])
        )
        names = bold + regular if weight >= BOLD_THRESHOLD else list(regular)
        if self.font_dir:
            return [str(self.font_dir / name) for name in names] + names
        return names

    def _load(self, family: str, weight: int, size: int) -> ImageFont.FreeTypeFont:
        for name in self.candidates(family, weight):
            try:
                return ImageFont.truetype(name, size)
            except OSError:
                continue

        self.logger.debug(
            "Fonte %s (%d) não encontrada, usando a fonte padrão do Pillow", family, weight
        )
        return ImageFont.load_default(size=size)
