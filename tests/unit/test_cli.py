# -*- coding: utf-8 -*-
"""
Testes da interface CLI (main.py)
"""

import logging

import pytest

import main


@pytest.fixture
def cli_dir(tmp_path, monkeypatch):
    """Executa a CLI num diretório temporário e remove os handlers criados"""
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level

    yield tmp_path

    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_invalid_color_returns_error_code(cli_dir, capsys):
    """Testa cor inválida: mensagem de erro e código 1, sem traceback"""
    rc = main.main(["--time", "2099-01-01 00:00", "--color", "zzzzzz", "--frames", "1"])

    assert rc == 1
    assert "Erro na geração do GIF" in capsys.readouterr().out
    assert not (cli_dir / "tmp" / "default.gif").exists()


def test_invalid_background_returns_error_code(cli_dir):
    """Testa fundo inválido"""
    assert main.main(["--time", "2099-01-01 00:00", "--bg", "nothex", "--frames", "1"]) == 1


def test_invalid_time_returns_error_code(cli_dir):
    """Testa data alvo inválida"""
    assert main.main(["--time", "garbage"]) == 1


def test_successful_run_writes_gif(cli_dir, capsys):
    """Testa execução bem-sucedida"""
    rc = main.main(["--time", "2099-01-01 00:00", "--frames", "1", "--name", "cli"])

    assert rc == 0
    assert (cli_dir / "tmp" / "cli.gif").exists()
    assert "cli.gif" in capsys.readouterr().out
