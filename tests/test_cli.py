"""
test_cli.py - Testes do comando zep

Executa o comando Click com CliRunner e um servico de compilacao falso,
conferindo textos fixos e codigos de retorno (0 sucesso, 1 falha, 2 problema).
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from zepton.cli import OPTIONS, RELEASE, USEINFO, VERSION, main
from zepton.model.results import CompileOutcome


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def service(monkeypatch, fake_service):
    instance = fake_service()
    monkeypatch.setattr("zepton.cli.JavacService", lambda: instance)
    return instance


def test_no_arguments_prints_banner_and_usage_problem(runner):
    result = runner.invoke(main, [])

    assert result.exit_code == 2
    assert RELEASE in result.output
    assert "No compiler options or files given!" in result.output


@pytest.mark.parametrize("flag", ["-help", "-?"])
def test_help(runner, flag):
    result = runner.invoke(main, [flag])

    assert result.exit_code == 0
    assert USEINFO in result.output
    assert "-brief       Print only a brief count of compiler messages." in result.output


@pytest.mark.parametrize("flag", ["-info", "-v"])
def test_info(runner, flag):
    result = runner.invoke(main, [flag])

    assert result.exit_code == 0
    assert result.output == f"{RELEASE}\n{VERSION}\n"


def test_help_short_circuits_later_tokens(runner):
    result = runner.invoke(main, ["-time", "-help", "-bogus", "x.txt"])
    assert result.exit_code == 0
    assert OPTIONS in result.output


def test_verbosity_conflict(runner, service, fixtures_dir: Path):
    result = runner.invoke(main, ["-brief", "-hush", str(fixtures_dir / "hello.zep")])

    assert result.exit_code == 2
    assert "Error! Option -hush ambiguous with option -brief and/or -mute option." in result.output
    assert service.calls == []


def test_unknown_flag(runner, service):
    result = runner.invoke(main, ["-bogus", "a.zep"])

    assert result.exit_code == 2
    assert "Zep option: '-bogus' is not recognized." in result.output


def test_success_exit_code(runner, service, fixtures_dir: Path):
    result = runner.invoke(main, [str(fixtures_dir / "hello.zep")])

    assert result.exit_code == 0
    assert len(service.calls) == 1


def test_failure_exit_code(runner, service, fixtures_dir: Path, undefined_symbol):
    service.outcomes.append(CompileOutcome(False, (undefined_symbol,)))
    result = runner.invoke(main, [str(fixtures_dir / "oops.zep")])

    assert result.exit_code == 1
    assert "Line 3 At 13: error: cannot find symbol" in result.output


def test_missing_file_exit_code(runner, service, tmp_path: Path):
    missing = tmp_path / "gone.zep"
    result = runner.invoke(main, [str(missing)])

    assert result.exit_code == 2
    assert f"File: '{missing}' does not exist." in result.output


def test_malformed_unit_exit_code(runner, service, fixtures_dir: Path):
    result = runner.invoke(main, [str(fixtures_dir / "broken.zep")])

    assert result.exit_code == 2
    assert "Error!" in result.output
    assert service.calls == []


def test_javac_options_pass_through(runner, service, fixtures_dir: Path):
    path = str(fixtures_dir / "hello.zep")
    result = runner.invoke(main, ["-final", "-javac", "-Xlint:all", "-d", "out", path])

    assert result.exit_code == 0
    assert service.calls[0][2] == ["-Xlint:all", "-d", "out", "-g:none"]


def test_empty_javac_passthrough(runner, service, fixtures_dir: Path):
    result = runner.invoke(main, ["-javac", str(fixtures_dir / "hello.zep")])

    assert result.exit_code == 2
    assert "'-javac' must be followed by at least one compiler option." in result.output
    assert service.calls == []


def test_service_exception_does_not_stop_run(runner, service, fixtures_dir: Path):
    service.outcomes.extend([OSError("disk full"), CompileOutcome(True)])
    result = runner.invoke(main, [str(fixtures_dir / "oops.zep"), str(fixtures_dir / "hello.zep")])

    assert result.exit_code == 1
    assert "ZeptoN Compiler Exception: 'OSError' is 'disk full'." in result.output
    assert len(service.calls) == 2
