# -*- coding: utf-8 -*-
"""
Sinks de bytes que recebem o stream produzido pelo encoder
"""

from __future__ import annotations

import io
import os
import queue
import threading
from concurrent.futures import Future
from contextlib import suppress
from pathlib import Path
from typing import Optional, Protocol

from ..domain.errors import OutputError
from .logging import get_logger

_END = object()
_ABORT = object()


class StreamSink(Protocol):
    """Interface de consumidor do stream codificado"""

    completion: Future

    def write(self, chunk: bytes) -> None:
        """Recebe o próximo bloco de bytes, na ordem de produção"""
        ...

    def close(self) -> None:
        """Sinaliza o fim do stream; completion resolve após o flush"""
        ...

    def abort(self) -> None:
        """Descarta a saída parcial"""
        ...


class MemoryStreamSink:
    """Sink em memória (útil para testes e para servir bytes diretamente)"""

    def __init__(self):
        self.completion: Future = Future()
        self._buffer = io.BytesIO()
        self._closed = False

    def write(self, chunk: bytes) -> None:
        if self._closed:
            raise OutputError("Sink já foi fechado")
        self._buffer.write(chunk)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.completion.set_result(self._buffer.getvalue())

    def abort(self) -> None:
        if self.completion.done():
            return
        self._closed = True
        self._buffer = io.BytesIO()
        self.completion.cancel()

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()


class FileStreamSink:
    """
    Escreve o stream em disco numa thread dedicada

    A fila é limitada: write() bloqueia quando o writer está atrasado.
    Uma falha de escrita resolve completion com OutputError e faz as
    próximas chamadas de write()/close() falharem imediatamente.
    """

    def __init__(self, path: Path, queue_size: int = 64):
        self.logger = get_logger("FileStreamSink")
        self.path = Path(path)
        self.completion: Future = Future()
        self._queue: queue.Queue = queue.Queue(maxsize=max(1, queue_size))
        self._aborted = threading.Event()
        self._error: Optional[OutputError] = None
        self._closed = False
        self.bytes_written = 0

        try:
            self._file = open(self.path, "wb")
        except OSError as e:
            raise OutputError(f"Não foi possível abrir {self.path}: {e}") from e

        self._thread = threading.Thread(
            target=self._drain, name=f"sink-{self.path.name}", daemon=True
        )
        self._thread.start()

    def write(self, chunk: bytes) -> None:
        if self._closed:
            raise OutputError(f"Sink {self.path} já foi fechado")
        self._put(bytes(chunk))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._put(_END)

    def abort(self) -> None:
        if self.completion.done():
            return
        self._closed = True
        self._aborted.set()
        with suppress(queue.Full):
            self._queue.put_nowait(_ABORT)
        self._thread.join()
        self.path.unlink(missing_ok=True)
        self.completion.cancel()
        self.logger.warning("Saída parcial descartada: %s", self.path)

    def _raise_if_failed(self):
        if self._error is not None:
            raise self._error

    def _put(self, item) -> None:
        # reavalia a falha do writer enquanto espera espaço na fila
        while True:
            self._raise_if_failed()
            try:
                self._queue.put(item, timeout=0.1)
                return
            except queue.Full:
                continue

    def _drain(self) -> None:
        try:
            while True:
                item = self._queue.get()
                if self._aborted.is_set() or item is _ABORT:
                    self._file.close()
                    return
                if item is _END:
                    self._finalize()
                    return
                self._file.write(item)
                self.bytes_written += len(item)
        except OSError as e:
            self._fail(e)

    def _finalize(self) -> None:
        self._file.flush()
        os.fsync(self._file.fileno())
        self._file.close()
        self.logger.debug("Arquivo gravado: %s (%d bytes)", self.path, self.bytes_written)
        self.completion.set_result(self.path)

    def _fail(self, exc: OSError) -> None:
        self.logger.error("Erro ao gravar %s: %s", self.path, exc)
        with suppress(OSError):
            self._file.close()
        with suppress(OSError):
            self.path.unlink(missing_ok=True)
        self._error = OutputError(f"Erro ao gravar {self.path}: {exc}")
        self.completion.set_exception(self._error)
