"""
main.py — Interface CLI do gerador de contagem regressiva
"""

import argparse

from countdown.application.services.countdown_service import (
    CountdownService,
    CountdownRequest,
)
from countdown.domain.errors import CountdownError
from countdown.domain.models.target import DEFAULT_PASSED_MESSAGE, TimeZoneId
from countdown.infra.logging import setup_logging
from countdown.infra.settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Gera um GIF animado com a contagem regressiva até uma data."
    )

    parser.add_argument(
        "--time", required=True, help="Data alvo (ex: '2099-01-01 00:00')"
    )
    parser.add_argument(
        "--width", type=int, default=640, help="Largura em pixels (150 a 1000)"
    )
    parser.add_argument(
        "--height", type=int, default=80, help="Altura em pixels (150 a 500)"
    )
    parser.add_argument(
        "--color", default="ffe600", help="Cor do texto em hex (padrão: ffe600)"
    )
    parser.add_argument(
        "--bg", default="000000", help="Cor de fundo em hex (padrão: 000000)"
    )
    parser.add_argument(
        "--name", default="default", help="Nome do arquivo de saída (sem extensão)"
    )
    parser.add_argument(
        "--frames", type=int, default=30, help="Quantidade de frames (1 a 90)"
    )
    parser.add_argument(
        "--timezone",
        choices=[zone.value for zone in TimeZoneId],
        default="uk",
        help="Fuso da data alvo",
    )
    parser.add_argument(
        "--datepassedtext",
        default=DEFAULT_PASSED_MESSAGE,
        help="Mensagem exibida quando a data já passou",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_file, settings.log_level)

    request = CountdownRequest(
        target_time=args.time,
        width=args.width,
        height=args.height,
        color=args.color,
        bg=args.bg,
        name=args.name,
        frames=args.frames,
        timezone=args.timezone,
        date_passed_text=args.datepassedtext,
    )

    try:
        service = CountdownService(settings)
        result_path = service.generate(request)

        print(f"✅ GIF criado com sucesso: {result_path}")
        return 0

    except (CountdownError, OSError) as e:
        print(f"❌ Erro na geração do GIF: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
