"""
options.py - Estado de opcoes do transcompilador zep

Proposito:
    Converter a lista ordenada de tokens da invocacao em um valor de
    configuracao imutavel, ou falhar imediatamente com um erro tipado.

Componentes principais:
    - VerbosityMode: full, brief, hush, mute
    - Action: compile, help, info
    - CompilerOptions: configuracao construida uma unica vez
    - parse_arguments: maquina de estados sobre os tokens

Exemplo de uso:
    options = parse_arguments(["-brief", "-javac", "-Xlint", "hi.zep"])
    options.compile_options()  # ['-Xlint', '-g']

Notas de implementacao:
    - -javac consome tokens ate o primeiro que termina em .zep.
    - -help/-info interrompem a analise imediatamente.
    - Depois do primeiro arquivo, so sao aceitos outros arquivos .zep.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from zepton.errors import (
    ConfigConflict,
    FileExtensionError,
    FileOrderError,
    UnknownFlag,
    UsageError,
)

SOURCE_EXT = ".zep"

JAVAC_FINAL = "-g:none"
JAVAC_DEBUG = "-g"

ERROR_NO_INPUT = "No compiler options or files given! Use -help for options."
ERROR_NO_FILES = "No source files given! Use -help for options."
ERROR_PARAM_FILES = "Zep option: '{}' must precede ZeptoN source code files list."
ERROR_PARAM_WRONG = "Zep option: '{}' is not recognized."
ERROR_FILE_EXTEN = "File: '{}' does not have '.zep' extension."
ERROR_JAVAC_EMPTY = "Zep option: '-javac' must be followed by at least one compiler option."


class VerbosityMode(Enum):
    FULL = "full"
    BRIEF = "brief"
    HUSH = "hush"
    MUTE = "mute"


class Action(Enum):
    COMPILE = "compile"
    HELP = "help"
    INFO = "info"


_VERBOSITY_FLAGS: Dict[str, VerbosityMode] = {
    "-brief": VerbosityMode.BRIEF,
    "-hush": VerbosityMode.HUSH,
    "-mute": VerbosityMode.MUTE,
}

_CONFLICT_MESSAGES: Dict[VerbosityMode, str] = {
    VerbosityMode.BRIEF: "Option -brief ambiguous with option -hush and/or -mute option.",
    VerbosityMode.HUSH: "Option -hush ambiguous with option -brief and/or -mute option.",
    VerbosityMode.MUTE: "Option -mute ambiguous with -brief and/or -hush option.",
}

HELP_FLAGS = ("-help", "-?")
INFO_FLAGS = ("-info", "-v")


@dataclass(frozen=True)
class CompilerOptions:
    verbosity: VerbosityMode = VerbosityMode.FULL
    final: bool = False
    echo: bool = False
    time: bool = False
    files: Tuple[str, ...] = ()
    javac_args: Tuple[str, ...] = ()
    action: Action = Action.COMPILE

    def compile_options(self) -> List[str]:
        """Opcoes repassadas ao javac mais exatamente uma opcao de depuracao."""
        return [*self.javac_args, JAVAC_FINAL if self.final else JAVAC_DEBUG]


def parse_arguments(tokens: Sequence[str]) -> CompilerOptions:
    if not tokens:
        raise UsageError(message=ERROR_NO_INPUT)

    verbosity = VerbosityMode.FULL
    final = echo = timed = False
    javac_args: List[str] = []
    index = 0

    while index < len(tokens) and tokens[index].startswith("-"):
        token = tokens[index]
        index += 1

        if token == "-time":
            timed = True
        elif token == "-echo":
            echo = True
        elif token == "-final":
            final = True
        elif token in _VERBOSITY_FLAGS:
            mode = _VERBOSITY_FLAGS[token]
            if verbosity not in (VerbosityMode.FULL, mode):
                raise ConfigConflict(message=_CONFLICT_MESSAGES[mode])
            verbosity = mode
        elif token == "-javac":
            passthrough = len(javac_args)
            while index < len(tokens) and not tokens[index].endswith(SOURCE_EXT):
                javac_args.append(tokens[index])
                index += 1
            if len(javac_args) == passthrough:
                raise UsageError(message=ERROR_JAVAC_EMPTY)
        elif token in HELP_FLAGS:
            return CompilerOptions(action=Action.HELP)
        elif token in INFO_FLAGS:
            return CompilerOptions(action=Action.INFO)
        else:
            raise UnknownFlag(message=ERROR_PARAM_WRONG.format(token))

    files: List[str] = []
    for token in tokens[index:]:
        if token.endswith(SOURCE_EXT):
            files.append(token)
        elif token.startswith("-"):
            raise FileOrderError(message=ERROR_PARAM_FILES.format(token))
        else:
            raise FileExtensionError(message=ERROR_FILE_EXTEN.format(token))

    if not files:
        raise UsageError(message=ERROR_NO_FILES)

    return CompilerOptions(
        verbosity=verbosity,
        final=final,
        echo=echo,
        time=timed,
        files=tuple(files),
        javac_args=tuple(javac_args),
    )
