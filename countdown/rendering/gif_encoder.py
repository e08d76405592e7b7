# -*- coding: utf-8 -*-
"""
Encoder de GIF animado com saída em streaming

Ciclo de vida: CREATED -> start() -> add_frame()* -> finish() -> FINISHED.
Cada bloco é entregue ao sink assim que é montado; o encoder não guarda
a animação inteira em memória.
"""

from __future__ import annotations

import struct
from concurrent.futures import Future
from enum import Enum

from PIL import Image

from ..domain.errors import SequenceError
from ..domain.models.frame import Frame
from ..infra.logging import get_logger
from ..infra.stream_sink import StreamSink
from . import lzw

HEADER = b"GIF89a"
TRAILER = b"\x3b"
PALETTE_BITS = 8
PALETTE_SIZE = 1 << PALETTE_BITS
# 2^(7+1) entradas, resolução de cor de 8 bits
GLOBAL_TABLE_FLAGS = 0x80 | 0x70 | (PALETTE_BITS - 1)
LOCAL_TABLE_FLAGS = 0x80 | (PALETTE_BITS - 1)


class EncoderState(Enum):
    CREATED = "created"
    STARTED = "started"
    FINISHED = "finished"


class GifEncoder:
    """Quantiza, comprime e emite frames GIF89a em ordem"""

    def __init__(
        self,
        width: int,
        height: int,
        sink: StreamSink,
        repeat: int = 0,
        delay_ms: int = 1000,
        quality: int = 10,
    ):
        self.logger = get_logger("GifEncoder")
        self.width = width
        self.height = height
        self.sink = sink
        self.state = EncoderState.CREATED
        self.frames_written = 0
        self.set_repeat(repeat)
        self.set_delay(delay_ms)
        self.set_quality(quality)

    @property
    def completion(self) -> Future:
        return self.sink.completion

    def set_repeat(self, repeat: int):
        """-1 toca uma vez, 0 repete para sempre, n repete n vezes"""
        if self.frames_written:
            raise SequenceError("repeat só pode ser alterado antes do primeiro frame")
        self.repeat = repeat

    def set_delay(self, delay_ms: int):
        """Atraso entre frames; o GIF armazena centésimos de segundo"""
        self.delay_cs = round(delay_ms / 10)

    def set_quality(self, quality: int):
        """Iterações de refinamento k-means da paleta (1 a 30)"""
        self.quality = max(1, min(int(quality), 30))

    def start(self):
        if self.state is not EncoderState.CREATED:
            raise SequenceError(f"start() chamado no estado {self.state.value}")
        self.state = EncoderState.STARTED
        self.sink.write(HEADER)

    def add_frame(self, frame: Frame):
        if self.state is not EncoderState.STARTED:
            raise SequenceError(f"add_frame() chamado no estado {self.state.value}")
        if (frame.width, frame.height) != (self.width, self.height):
            raise ValueError(
                f"Frame {frame.width}x{frame.height} não corresponde ao "
                f"encoder {self.width}x{self.height}"
            )

        indices, palette = self._quantize(frame)
        first = self.frames_written == 0

        block = bytearray()
        if first:
            block += self._logical_screen(GLOBAL_TABLE_FLAGS)
            block += palette
            if self.repeat >= 0:
                block += self._loop_extension()
        block += self._graphic_control()
        block += self._image_descriptor(0 if first else LOCAL_TABLE_FLAGS)
        if not first:
            block += palette
        block.append(PALETTE_BITS)
        block += lzw.pack_sub_blocks(lzw.encode(indices, PALETTE_BITS))

        self.sink.write(bytes(block))
        self.frames_written += 1
        self.logger.debug("Frame %d codificado (%d bytes)", self.frames_written, len(block))

    def finish(self):
        if self.state is not EncoderState.STARTED:
            raise SequenceError(f"finish() chamado no estado {self.state.value}")
        if self.frames_written == 0:
            # sem tabela global: apenas o descritor de tela
            self.sink.write(self._logical_screen(0x70))
        self.sink.write(TRAILER)
        self.state = EncoderState.FINISHED
        self.sink.close()

    def abort(self):
        """Descarta a saída parcial e encerra o encoder"""
        self.state = EncoderState.FINISHED
        self.sink.abort()

    def _quantize(self, frame: Frame) -> tuple[bytes, bytes]:
        image = Image.frombytes("RGB", (frame.width, frame.height), frame.pixels)
        indexed = image.quantize(
            colors=PALETTE_SIZE,
            method=Image.Quantize.MEDIANCUT,
            kmeans=self.quality,
            dither=Image.Dither.NONE,
        )
        palette = bytes(indexed.getpalette()[: PALETTE_SIZE * 3])
        palette = palette.ljust(PALETTE_SIZE * 3, b"\x00")
        return indexed.tobytes(), palette

    def _logical_screen(self, flags: int) -> bytes:
        return struct.pack("<HHBBB", self.width, self.height, flags, 0, 0)

    def _loop_extension(self) -> bytes:
        return b"\x21\xff\x0bNETSCAPE2.0\x03\x01" + struct.pack("<H", self.repeat) + b"\x00"

    def _graphic_control(self) -> bytes:
        # sem transparência, disposal 0
        return b"\x21\xf9\x04\x00" + struct.pack("<H", self.delay_cs) + b"\x00\x00"

    def _image_descriptor(self, flags: int) -> bytes:
        return b"\x2c" + struct.pack("<HHHHB", 0, 0, self.width, self.height, flags)
