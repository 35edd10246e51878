"""
toolchain.py - Servico de compilacao externo (javac)

Proposito:
    Expor o contrato estreito "texto Java + opcoes -> aceitacao +
    diagnosticos" e uma implementacao concreta que executa o javac em um
    subprocesso e interpreta seu relatorio de diagnosticos.

Componentes principais:
    - CompilerService: protocolo do servico de compilacao
    - JavacService: implementacao via subprocess
    - parse_javac_output: relatorio textual do javac -> Diagnostic

Dependencias criticas:
    - subprocess/tempfile: execucao isolada do javac
    - zepton.model.results: Diagnostic, DiagnosticKind, CompileOutcome

Exemplo de uso:
    service = JavacService()
    outcome = service.compile("Hi", java_source, ["-g"])
    outcome.accepted

Notas de implementacao:
    - O executavel vem de ZEP_JAVAC, depois $JAVA_HOME/bin/javac, depois PATH.
    - A coluna e derivada da linha do circunflexo impressa pelo javac.
    - Avisos das categorias obrigatorias do javac (deprecation, removal,
      unchecked, preview) sao classificados como MANDATORY_WARNING.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import sys
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, TextIO

from zepton.errors import ToolchainInvocationError
from zepton.model.results import CompileOutcome, Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

JAVAC_ENV = "ZEP_JAVAC"
MANDATORY_CATEGORIES = ("deprecation", "removal", "unchecked", "preview")

_HEADER = re.compile(r"^(?P<path>.+?):(?P<line>\d+): (?P<kind>error|warning|note): (?P<message>.*)$")
_UNPOSITIONED = re.compile(r"^(?P<kind>error|warning): (?P<message>.*)$")
_NOTE = re.compile(r"^Note: (?P<message>.*)$")
_COUNT = re.compile(r"^\d+ (errors?|warnings?)$")
_CARET = re.compile(r"^\s*\^\s*$")


class CompilerService(Protocol):
    def compile(
        self,
        unit_name: str,
        java_source: str,
        options: Sequence[str],
    ) -> CompileOutcome:
        ...


@dataclass
class _Pending:
    kind: DiagnosticKind
    line: int
    message: str
    column: int = 0
    source_seen: bool = False
    details: List[str] = field(default_factory=list)

    def build(self) -> Diagnostic:
        message = "\n".join([self.message, *self.details])
        column = self.column if self.column else (1 if self.line else 0)
        return Diagnostic(kind=self.kind, line=self.line, column=column, message=message)


def _classify(kind: str, message: str) -> DiagnosticKind:
    if kind == "error":
        return DiagnosticKind.ERROR
    if kind == "note":
        return DiagnosticKind.NOTE
    category = re.match(r"^\[(?P<category>[\w-]+)\]", message)
    if category and category.group("category") in MANDATORY_CATEGORIES:
        return DiagnosticKind.MANDATORY_WARNING
    return DiagnosticKind.WARNING


def parse_javac_output(text: str) -> List[Diagnostic]:
    """
    Converte o relatorio padrao do javac em registros de diagnostico.

    Formato reconhecido:
        Hi.java:3: error: cannot find symbol
        <linha de codigo>
            ^
          symbol:   variable x
        Note: Hi.java uses unchecked or unsafe operations.
        1 error
    """
    diagnostics: List[Diagnostic] = []
    pending: Optional[_Pending] = None

    def flush() -> None:
        nonlocal pending
        if pending is not None:
            diagnostics.append(pending.build())
            pending = None

    for raw in text.splitlines():
        header = _HEADER.match(raw)
        if header:
            flush()
            message = header.group("message")
            pending = _Pending(
                kind=_classify(header.group("kind"), message),
                line=int(header.group("line")),
                message=message,
            )
            continue

        unpositioned = _UNPOSITIONED.match(raw)
        if unpositioned:
            flush()
            message = unpositioned.group("message")
            pending = _Pending(kind=_classify(unpositioned.group("kind"), message), line=0, message=message)
            continue

        note = _NOTE.match(raw)
        if note:
            flush()
            pending = _Pending(kind=DiagnosticKind.NOTE, line=0, message=note.group("message"))
            continue

        if _COUNT.match(raw.strip()):
            flush()
            continue

        if pending is not None and pending.line and not pending.source_seen:
            pending.source_seen = True
            continue

        if not raw.strip():
            continue

        if pending is None:
            diagnostics.append(Diagnostic(DiagnosticKind.OTHER, 0, 0, raw.strip()))
        elif pending.line and not pending.column and _CARET.match(raw):
            pending.column = raw.index("^") + 1
        else:
            pending.details.append(raw.strip())

    flush()
    return diagnostics


def unit_source_path(root: Path, unit_name: str) -> Path:
    """Caminho do arquivo .java para o nome logico (segmentos vazios ignorados)."""
    parts = [part for part in unit_name.split(".") if part]
    if not parts:
        raise ToolchainInvocationError(message=f"Invalid compilation unit name '{unit_name}'.")
    parts[-1] = f"{parts[-1]}.java"
    return root.joinpath(*parts)


@dataclass
class JavacService:
    """
    Compila texto Java executando o javac.

    Attributes:
        executable: caminho explicito do javac (opcional)
        output_dir: destino dos .class quando as opcoes nao trazem -d
        error_sink: recebe a saida padrao do javac (nao inspecionada)
    """

    executable: Optional[str] = None
    output_dir: Optional[Path] = None
    error_sink: Optional[TextIO] = None

    def resolve_executable(self) -> str:
        if self.executable:
            return self.executable
        configured = os.environ.get(JAVAC_ENV)
        if configured:
            return configured
        java_home = os.environ.get("JAVA_HOME")
        if java_home:
            candidate = Path(java_home) / "bin" / "javac"
            if candidate.exists():
                return str(candidate)
        found = shutil.which("javac")
        if found is None:
            raise ToolchainInvocationError(
                message=f"javac not found; set {JAVAC_ENV} or JAVA_HOME."
            )
        return found

    def build_command(self, executable: str, source_path: Path, options: Sequence[str]) -> List[str]:
        command = [executable, "-J-Duser.language=en", "-encoding", "UTF-8"]
        if "-d" not in options:
            command.extend(["-d", str(self.output_dir or Path.cwd())])
        command.extend(options)
        command.append(str(source_path))
        return command

    def compile(
        self,
        unit_name: str,
        java_source: str,
        options: Sequence[str],
    ) -> CompileOutcome:
        executable = self.resolve_executable()
        start = time.perf_counter()
        try:
            with tempfile.TemporaryDirectory(prefix="zep-") as workdir:
                source_path = unit_source_path(Path(workdir), unit_name)
                source_path.parent.mkdir(parents=True, exist_ok=True)
                source_path.write_text(java_source, encoding="utf-8")

                command = self.build_command(executable, source_path, options)
                logger.info("Executando: %s", " ".join(command))
                completed = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
        except OSError as exc:
            raise ToolchainInvocationError(message=str(exc)) from exc
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        if completed.stdout:
            (self.error_sink or sys.stderr).write(completed.stdout)
        logger.debug("javac retornou %d em %d ms", completed.returncode, elapsed_ms)
        diagnostics = parse_javac_output(completed.stderr)
        return CompileOutcome(
            accepted=completed.returncode == 0,
            diagnostics=tuple(diagnostics),
            elapsed_ms=elapsed_ms,
        )
