"""
cli.py - Interface de linha de comando do transcompilador zep

Proposito:
    Receber os tokens da invocacao, montar a configuracao, executar o
    orquestrador e traduzir o status final em codigo de retorno.

Componentes principais:
    - main: comando Click que repassa todos os tokens ao parser de opcoes
    - textos fixos de uso, opcoes e versao

Dependencias criticas:
    - click: CLI e saida
    - zepton.options: maquina de estados das opcoes
    - zepton.compiler: pipeline principal

Exemplo de uso:
    zep -brief -time hello.zep
    zep -javac -Xlint:all -d out hello.zep

Notas de implementacao:
    - As opcoes usam um unico hifen (-echo, -final...), por isso o Click
      nao interpreta nada: os tokens chegam intactos a parse_arguments.
    - Codigos de retorno: 0 sucesso, 1 falha, 2 problema.
    - Logs vao para stderr (ZEP_LOG_LEVEL); relatorios para stdout.
"""

from __future__ import annotations

import logging
import os
from typing import Tuple

try:
    import click
except ImportError:
    raise ImportError(
        "click nao encontrado. Instale o zepton com: pip install zepton"
    )

from zepton.compiler import ZeptonCompiler
from zepton.errors import ZepError
from zepton.options import Action, parse_arguments
from zepton.toolchain import JavacService

LOG_LEVEL_ENV = "ZEP_LOG_LEVEL"

LICENSE = "License is GNU General Public License (GPL) version 3.0"
VERSION = "Version 1.0 Released August 2019"
RELEASE = "Zep - ZeptoN Echo Transcompiler\n(C) Copyright 2019 William F. Gilreath. All Rights Reserved"
USEINFO = "Usage:  zep (option)* [ -javac (javac-options)+ ] (ZeptoN-file)+ | ( -help | -info )"

OPTIONS = (
    "\n"
    "  ZeptoN Compiler OPTIONS:\n"
    "\n"
    "  Compiler Options:  [ -echo ] | [ -final ] | [ -time ]\n"
    "\n"
    "    -echo        Print ZeptoN compiler options and success or failure.\n"
    "    -final       Compile final release without debug information.\n"
    "    -time        Print total time for success compiling of a source file.\n"
    "\n"
    "  Error Reporting Option: [ -brief | -hush | -mute ]\n"
    "\n"
    "    -brief       Print only a brief count of compiler messages.\n"
    "    -hush        Disable all compiler messages except errors.\n"
    "    -mute        Disable all compiler messages.\n"
    "\n"
    "  Help or Version Option:  ( -help | -? ) | ( -info | -v )\n"
    "\n"
    "    -help        Print list of compiler options and exit.\n"
    "    -info        Print compiler version information and exit.\n"
    "\n"
    "  Note: All options for -javac are passed as-is to the compiler.\n"
)


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(tokens: Tuple[str, ...]) -> None:
    """Zep - ZeptoN transcompiler"""
    _configure_logging()

    if not tokens:
        click.echo(f"{RELEASE} {VERSION}\n{LICENSE}")

    try:
        options = parse_arguments(tokens)

        if options.action is Action.HELP:
            click.echo(f"\n{USEINFO}\n{OPTIONS}")
            raise SystemExit(0)
        if options.action is Action.INFO:
            click.echo(f"{RELEASE}\n{VERSION}")
            raise SystemExit(0)

        status = ZeptonCompiler(options, service=JavacService()).run()

    except ZepError as exc:
        _print_problem(exc)
        raise SystemExit(exc.status.value)

    raise SystemExit(status.value)


def _print_problem(error: ZepError) -> None:
    click.echo()
    click.echo(click.style(f"Error! {error}", fg="red"))
    click.echo()


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    main()
