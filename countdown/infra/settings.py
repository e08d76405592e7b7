# -*- coding: utf-8 -*-
"""
Settings management using pydantic-settings
"""

import json
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class CountdownSettings(BaseSettings):
    """Configurações da aplicação"""

    model_config = SettingsConfigDict(
        env_prefix="COUNTDOWN_", env_file=".env", case_sensitive=False
    )

    output_dir: str = "tmp"
    font_dir: Optional[str] = None
    sink_queue_size: int = 64
    log_file: str = "countdown.log"
    log_level: str = "INFO"


def load_settings(config_path: Path = Path("config.json")) -> CountdownSettings:
    """Carrega as configurações da aplicação"""
    # Primeiro tenta carregar do config.json (compatibilidade)
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)
        return CountdownSettings(**config_data)

    # Senão carrega das variáveis de ambiente ou padrões
    return CountdownSettings()
