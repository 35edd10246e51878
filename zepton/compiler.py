"""
compiler.py - Orquestrador principal do transcompilador zep

Proposito:
    Executar o pipeline por unidade: leitura, reescrita, submissao ao
    compilador externo, mapeamento de diagnosticos, contagem, tempo e
    status. Unidades sao processadas em sequencia, na ordem da invocacao.

Componentes principais:
    - ZeptonCompiler: valida arquivos e compila cada unidade
    - UnitResult: resultado de uma tentativa de compilacao
    - verify_file: existencia, leitura e tamanho minimo

Dependencias criticas:
    - click: saida padrao dos relatorios
    - zepton.rewriter: reescrita ZeptoN -> Java
    - zepton.toolchain: servico de compilacao (javac)
    - zepton.error_handler: formatacao dos diagnosticos

Exemplo de uso:
    options = parse_arguments(["-brief", "hello.zep"])
    status = ZeptonCompiler(options).run()
    raise SystemExit(status.value)

Notas de implementacao:
    - Nunca repete uma compilacao; uma unidade rejeitada nao interrompe
      as seguintes, mas eleva o status final para FAILURE.
    - Erros de arquivo e de reescrita sao fatais (PROBLEM) e propagam.
    - Qualquer excecao do servico de compilacao e relatada e a unidade
      conta como rejeitada; as unidades seguintes continuam.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

import click

from zepton.error_handler import DiagnosticMapper
from zepton.errors import (
    FileMissingError,
    FileTooSmallError,
    FileUnreadableError,
    ToolchainInvocationError,
)
from zepton.model.nodes import SOURCE_ENCODING, RewriteResult, SourceUnit
from zepton.model.results import CompileOutcome, DiagnosticSummary, ProcessStatus
from zepton.options import CompilerOptions, VerbosityMode
from zepton.rewriter import rewrite
from zepton.toolchain import CompilerService, JavacService

logger = logging.getLogger(__name__)

FILE_SIZE_MIN = 15


def verify_file(path: str) -> None:
    """Arquivo deve existir, ser legivel e ter ao menos FILE_SIZE_MIN bytes."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileMissingError(message=f"File: '{path}' does not exist.")
    if not file_path.is_file() or not os.access(file_path, os.R_OK):
        raise FileUnreadableError(message=f"File: '{path}' is unreadable.")
    if file_path.stat().st_size < FILE_SIZE_MIN:
        raise FileTooSmallError(message=f"File: '{path}' is too small.")


@dataclass
class UnitResult:
    path: str
    accepted: bool
    rewrite: RewriteResult
    outcome: Optional[CompileOutcome] = None
    summary: DiagnosticSummary = field(default_factory=DiagnosticSummary)
    elapsed_ms: int = 0


class ZeptonCompiler:
    def __init__(
        self,
        options: CompilerOptions,
        service: Optional[CompilerService] = None,
        echo: Callable[[str], None] = click.echo,
    ):
        self.options = options
        self.service = service if service is not None else JavacService()
        self.echo = echo
        self.compile_options: List[str] = options.compile_options()

    def run(self) -> ProcessStatus:
        for path in self.options.files:
            verify_file(path)

        status = ProcessStatus.SUCCESS
        for path in self.options.files:
            result = self.compile_unit(path)
            if not result.accepted:
                status = status.fold(ProcessStatus.FAILURE)
        logger.info("Status final: %s", status.name)
        return status

    def compile_unit(self, path: str) -> UnitResult:
        if self.options.echo:
            self._echo_options()

        unit = SourceUnit.read(path)
        rewritten = rewrite(unit.text, unit.name)
        result = UnitResult(path=path, accepted=False, rewrite=rewritten)

        start = time.perf_counter()
        try:
            result.outcome = self.service.compile(
                rewritten.unit_name,
                rewritten.java_source,
                list(self.compile_options),
            )
        except Exception as exc:
            result.elapsed_ms = self._elapsed_ms(start)
            self._report_exception(exc)
        else:
            result.elapsed_ms = self._elapsed_ms(start)
            result.accepted = result.outcome.accepted
            self._report(unit, result)

        self._finish(unit, result)
        return result

    def _report_exception(self, exc: Exception) -> None:
        cause = exc
        if isinstance(exc, ToolchainInvocationError) and exc.__cause__ is not None:
            cause = exc.__cause__
        logger.debug("Falha no servico de compilacao", exc_info=exc)
        self.echo(f"ZeptoN Compiler Exception: '{type(cause).__name__}' is '{cause}'.")

    def _report(self, unit: SourceUnit, result: UnitResult) -> None:
        verbosity = self.options.verbosity
        if verbosity is VerbosityMode.MUTE:
            return
        mapper = DiagnosticMapper(unit.name, verbosity)
        fragments = mapper.report(result.outcome.diagnostics, result.rewrite.lines(), result.summary)
        if verbosity is not VerbosityMode.BRIEF and not result.accepted:
            for fragment in fragments:
                self.echo(fragment)

    def _finish(self, unit: SourceUnit, result: UnitResult) -> None:
        if self.options.verbosity is VerbosityMode.BRIEF:
            self.echo(result.summary.render())
        if self.options.time:
            self.echo(f"Time: {result.elapsed_ms}-ms for: {unit.name}")
        if self.options.echo:
            verdict = "Success." if result.accepted else "Failure!"
            self.echo(f"ZeptoN Compiler result for file: '{unit.name}' is: {verdict}")

    def _echo_options(self) -> None:
        params = ", ".join(self.compile_options)
        files = ", ".join(self.options.files)
        self.echo(f"\nZeptoN Compiler Options: [{params}] Files: [{files}] Encoding: {SOURCE_ENCODING}\n")

    def _elapsed_ms(self, start: float) -> int:
        elapsed = int((time.perf_counter() - start) * 1000)
        logger.debug("Compilacao levou %d ms", elapsed)
        return elapsed
