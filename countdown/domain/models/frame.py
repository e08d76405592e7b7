# -*- coding: utf-8 -*-
"""
Frames renderizados e resultado do cálculo de tempo
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Union

from .duration import Duration, FieldSet


@dataclass(frozen=True)
class Frame:
    """Buffer RGB completo de um passo da animação"""

    width: int
    height: int
    kind: Literal["countdown", "message"]
    pixels: bytes
    fields: Optional[FieldSet] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class Passed:
    """A data alvo já passou"""

    message: str


@dataclass(frozen=True)
class Remaining:
    """Ainda falta tempo até a data alvo"""

    duration: Duration


TimeResult = Union[Passed, Remaining]
