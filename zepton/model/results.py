"""
results.py - Diagnosticos, contadores e status de processo

Proposito:
    Representar os registros de diagnostico devolvidos pelo compilador
    externo, o agregador de contagens por severidade e o status final
    da invocacao.

Componentes principais:
    - DiagnosticKind: as cinco severidades reconhecidas
    - SourceLocation: arquivo, linha e coluna de um diagnostico
    - Diagnostic: registro individual com linha/coluna 1-based
    - DiagnosticSummary: seis contadores (cinco severidades + total)
    - CompileOutcome: resposta do servico de compilacao
    - ProcessStatus: success/failure/problem mapeados para exit code

Dependencias criticas:
    - dataclasses/enum/typing: estrutura e tipagem

Exemplo de uso:
    summary = DiagnosticSummary()
    summary.record(DiagnosticKind.ERROR)
    print(summary.render())

Notas de implementacao:
    - Linha/coluna 0 indicam diagnostico sem posicao (notas, avisos de opcao).
    - A ordem de declaracao de DiagnosticKind define a ordem do resumo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class DiagnosticKind(Enum):
    ERROR = "error"
    MANDATORY_WARNING = "mandatory warning"
    NOTE = "note"
    OTHER = "other"
    WARNING = "warning"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class SourceLocation:
    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    line: int
    column: int
    message: str

    @property
    def has_position(self) -> bool:
        return self.line > 0

    @property
    def headline(self) -> str:
        """Primeira linha da mensagem (detalhes do javac ficam nas seguintes)."""
        return self.message.split("\n", 1)[0]

    def location(self, filename: str) -> SourceLocation:
        return SourceLocation(file=filename, line=self.line, column=self.column)


def _empty_counts() -> Dict[DiagnosticKind, int]:
    return {kind: 0 for kind in DiagnosticKind}


@dataclass
class DiagnosticSummary:
    """Contadores por severidade de uma unidade; descartado apos o relatorio."""

    counts: Dict[DiagnosticKind, int] = field(default_factory=_empty_counts)
    total: int = 0

    def record(self, kind: DiagnosticKind) -> None:
        self.counts[kind] += 1
        self.total += 1

    def count(self, kind: DiagnosticKind) -> int:
        return self.counts[kind]

    def render(self) -> str:
        if self.total == 0:
            return "No compiler diagnostic messages."
        lines = [f"{self.total:3d} Diagnostic messages:"]
        for kind in DiagnosticKind:
            if self.counts[kind] > 0:
                lines.append(f"  {self.counts[kind]:3d} {kind.label}")
        lines.append("")
        return "\n".join(lines)


@dataclass(frozen=True)
class CompileOutcome:
    accepted: bool
    diagnostics: Tuple[Diagnostic, ...] = ()
    elapsed_ms: int = 0


class ProcessStatus(Enum):
    SUCCESS = 0
    FAILURE = 1
    PROBLEM = 2

    def fold(self, other: "ProcessStatus") -> "ProcessStatus":
        """Retorna o pior dos dois status."""
        return self if self.value >= other.value else other
