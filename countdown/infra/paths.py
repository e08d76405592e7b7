# -*- coding: utf-8 -*-
"""
Paths utilities for the output artifacts
"""

from pathlib import Path
from typing import Optional

from ..domain.errors import OutputError

GIF_EXTENSION = ".gif"


def output_dir(base: str = "tmp", cwd: Optional[Path] = None) -> Path:
    """Resolve (e cria se necessário) o diretório de saída"""
    directory = Path(base)
    if not directory.is_absolute():
        directory = (cwd or Path.cwd()) / directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Não foi possível criar {directory}: {e}") from e
    return directory


def output_path(name: str, base: str = "tmp", cwd: Optional[Path] = None) -> Path:
    """Caminho final do GIF: <cwd>/<base>/<name>.gif"""
    return output_dir(base, cwd) / f"{name}{GIF_EXTENSION}"
