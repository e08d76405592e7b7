# -*- coding: utf-8 -*-
"""
countdown/application/services/countdown_service.py
Orquestração de uma sessão: cálculo -> frames -> encoder -> arquivo
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from ...domain.errors import GenerationCancelled
from ...domain.models.duration import decompose, decrement
from ...domain.models.frame import Passed, TimeResult
from ...domain.models.target import DEFAULT_PASSED_MESSAGE, RenderConfig, TargetSpec
from ...infra.logging import get_logger
from ...infra.paths import output_path
from ...infra.settings import CountdownSettings, load_settings
from ...infra.stream_sink import FileStreamSink, MemoryStreamSink, StreamSink
from ...rendering.fonts import FontBook
from ...rendering.frame_renderer import FrameRenderer
from ...rendering.gif_encoder import GifEncoder
from .duration_calculator import DurationCalculator


@dataclass
class CountdownRequest:
    """Parâmetros de invocação de uma geração"""

    target_time: str
    width: int = 640
    height: int = 80
    color: str = "ffe600"
    bg: str = "000000"
    name: str = "default"
    frames: int = 30
    timezone: str = "uk"
    date_passed_text: str = DEFAULT_PASSED_MESSAGE
    # generate() passa o caminho do arquivo; generate_bytes() passa os bytes
    callback: Optional[Callable[[Any], None]] = None
    cancel_event: Optional[threading.Event] = None


class CountdownService:
    """Gera o GIF da contagem regressiva de uma requisição"""

    def __init__(
        self,
        settings: Optional[CountdownSettings] = None,
        calculator: Optional[DurationCalculator] = None,
        fonts: Optional[FontBook] = None,
    ):
        self.logger = get_logger("CountdownService")
        self.settings = settings or load_settings()
        self.calculator = calculator or DurationCalculator()
        self.fonts = fonts or FontBook(self.settings.font_dir)

    def generate(self, request: CountdownRequest) -> Path:
        """Gera <output_dir>/<name>.gif e chama o callback após o flush"""
        target, config = self._build(request)
        self.logger.info(
            "Iniciando geração: nome=%s, %dx%d, frames=%d, fuso=%s",
            config.output_name,
            config.width,
            config.height,
            config.frame_count,
            target.timezone.value,
        )

        # ParseError sai aqui, antes de qualquer arquivo ser criado
        time_result = self.calculator.compute(target)

        path = output_path(config.output_name, self.settings.output_dir)
        self._run(
            time_result,
            target,
            config,
            lambda: FileStreamSink(path, self.settings.sink_queue_size),
            request.cancel_event,
        )

        if callable(request.callback):
            request.callback(path)

        self.logger.info("GIF criado com sucesso: %s", path)
        return path

    def generate_bytes(self, request: CountdownRequest) -> bytes:
        """
        Mesma geração, devolvendo os bytes do GIF em vez de gravar em disco

        O callback, se houver, recebe os bytes depois que o sink é fechado.
        """
        target, config = self._build(request)
        time_result = self.calculator.compute(target)
        sink = self._run(time_result, target, config, MemoryStreamSink, request.cancel_event)
        data = sink.completion.result()

        if callable(request.callback):
            request.callback(data)
        return data

    def encode(
        self,
        time_result: TimeResult,
        passed_message: str,
        renderer: FrameRenderer,
        encoder: GifEncoder,
        frame_count: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> int:
        """
        Renderiza e adiciona os frames ao encoder, em ordem

        Data passada: um único frame de mensagem. Caso contrário exatamente
        frame_count frames, decrementando um segundo depois de cada frame;
        se a duração zerar no meio, os frames restantes mostram a mensagem.
        """
        encoder.start()
        frames = 0

        if isinstance(time_result, Passed):
            encoder.add_frame(renderer.render_message_frame(time_result.message))
            frames = 1
        else:
            duration = time_result.duration
            for _ in range(frame_count):
                if cancel_event is not None and cancel_event.is_set():
                    raise GenerationCancelled(f"Cancelado após {frames} frames")

                if duration.is_elapsed:
                    frame = renderer.render_message_frame(passed_message)
                else:
                    frame = renderer.render_countdown_frame(decompose(duration))
                encoder.add_frame(frame)
                frames += 1

                # remove um segundo para o próximo frame
                decrement(duration, 1)

        encoder.finish()
        return frames

    def _build(self, request: CountdownRequest) -> tuple[TargetSpec, RenderConfig]:
        target = TargetSpec.create(
            request.target_time, request.timezone, request.date_passed_text
        )
        config = RenderConfig.create(
            width=request.width,
            height=request.height,
            frames=request.frames,
            color=request.color,
            bg=request.bg,
            name=request.name,
        )
        return target, config

    def _run(
        self,
        time_result: TimeResult,
        target: TargetSpec,
        config: RenderConfig,
        open_sink: Callable[[], StreamSink],
        cancel_event: Optional[threading.Event],
    ) -> StreamSink:
        # o sink só é aberto depois do renderer; dali em diante toda falha o aborta
        renderer = FrameRenderer(config, self.fonts)
        sink = open_sink()

        try:
            encoder = GifEncoder(config.width, config.height, sink)
            frames = self.encode(
                time_result,
                target.passed_message,
                renderer,
                encoder,
                config.frame_count,
                cancel_event,
            )
        except Exception as e:
            self.logger.error("Erro na geração de %s: %s", config.output_name, e)
            sink.abort()
            raise

        # aguarda o flush do sink; falha de escrita sobe como OutputError
        sink.completion.result()
        self.logger.debug("%d frames gravados", frames)
        return sink
