"""
error_handler.py - Mapeamento de diagnosticos do javac para mensagens

Proposito:
    Transformar registros de diagnostico em mensagens com linha, coluna e
    trecho do codigo Java gerado com um circunflexo apontando a coluna,
    respeitando o modo de verbosidade ativo.

Componentes principais:
    - DiagnosticMapper: filtro por modo, formatacao e classificacao

Dependencias criticas:
    - zepton.model.results: Diagnostic, DiagnosticKind, DiagnosticSummary
    - zepton.options: VerbosityMode

Exemplo de uso:
    mapper = DiagnosticMapper("hi.zep", VerbosityMode.FULL)
    for fragment in mapper.report(outcome.diagnostics, result.lines(), summary):
        click.echo(fragment)

Notas de implementacao:
    - Notas sao exibidas somente com o texto da mensagem.
    - Linha fora do intervalo degrada para trecho vazio, sem abortar.
    - O mapper nunca escreve; apenas devolve texto.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from zepton.model.results import Diagnostic, DiagnosticKind, DiagnosticSummary
from zepton.options import VerbosityMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosticMapper:
    filename: str
    verbosity: VerbosityMode = VerbosityMode.FULL

    def should_print(self, diagnostic: Diagnostic) -> bool:
        if self.verbosity is VerbosityMode.FULL:
            return True
        if self.verbosity is VerbosityMode.HUSH:
            return diagnostic.kind is DiagnosticKind.ERROR
        return False

    def format(self, diagnostic: Diagnostic, lines: Sequence[str]) -> str:
        parts = [f"Error: {self.filename}."]
        if diagnostic.kind is DiagnosticKind.NOTE:
            parts.append(diagnostic.message)
        else:
            parts.append(
                f"Line {diagnostic.line} At {diagnostic.column}: "
                f"{diagnostic.kind.value}: {diagnostic.headline}"
            )
            parts.append(self.code_line(lines, diagnostic.line, diagnostic.column))
        parts.append("")
        return "\n".join(parts)

    def code_line(self, lines: Sequence[str], line_number: int, column: int) -> str:
        line_text = self._get_line(lines, line_number)
        if line_text is None:
            logger.debug("Linha %d fora do texto gerado (%d linhas)", line_number, len(lines))
            return ""
        return f"{line_text}\n{self._pointer_line(column)}"

    def classify(self, diagnostic: Diagnostic, summary: DiagnosticSummary) -> None:
        summary.record(diagnostic.kind)

    def report(
        self,
        diagnostics: Iterable[Diagnostic],
        lines: Sequence[str],
        summary: DiagnosticSummary,
    ) -> List[str]:
        fragments: List[str] = []
        for diagnostic in diagnostics:
            self.classify(diagnostic, summary)
            logger.debug("%s: %s", diagnostic.location(self.filename), diagnostic.kind.value)
            if self.should_print(diagnostic):
                fragments.append(self.format(diagnostic, lines))
        return fragments

    def _get_line(self, lines: Sequence[str], line_number: int) -> Optional[str]:
        if 1 <= line_number <= len(lines):
            return lines[line_number - 1]
        return None

    def _pointer_line(self, column: int) -> str:
        return " " * (max(column, 1) - 1) + "^"
