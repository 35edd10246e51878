"""
api.py - API publica para reescrita e compilacao em memoria

Proposito:
    Expor a reescrita e a compilacao de texto ZeptoN sem exigir arquivos
    .zep em disco. Util para testes, notebooks e integracao com editores.

Componentes principais:
    - transpile_string(): texto ZeptoN -> RewriteResult
    - compile_string(): reescreve e submete ao servico de compilacao
    - MemoryCompilationResult: resultado com relatorio formatado

Exemplo de uso:
    import zepton
    result = zepton.compile_string('prog Hi { begin println("hi"); }')
    if not result.success:
        print(result.report())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from zepton.error_handler import DiagnosticMapper
from zepton.model.nodes import RewriteResult
from zepton.model.results import CompileOutcome, DiagnosticSummary
from zepton.options import CompilerOptions, VerbosityMode
from zepton.rewriter import rewrite
from zepton.toolchain import CompilerService, JavacService


@dataclass
class MemoryCompilationResult:
    """
    Resultado da compilacao em memoria.

    Attributes:
        filename: nome usado nas mensagens
        rewrite: texto Java gerado e metadados
        outcome: aceitacao e diagnosticos do compilador
        summary: contagem por severidade
    """

    filename: str
    rewrite: RewriteResult
    outcome: CompileOutcome
    summary: DiagnosticSummary = field(default_factory=DiagnosticSummary)

    @property
    def success(self) -> bool:
        return self.outcome.accepted

    def report(self, verbosity: VerbosityMode = VerbosityMode.FULL) -> str:
        """Diagnosticos formatados como o CLI os imprimiria."""
        if verbosity is VerbosityMode.BRIEF:
            return self.summary.render()
        mapper = DiagnosticMapper(self.filename, verbosity)
        lines = self.rewrite.lines()
        return "\n".join(
            mapper.format(diagnostic, lines)
            for diagnostic in self.outcome.diagnostics
            if mapper.should_print(diagnostic)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "rewrite": self.rewrite.to_dict(),
            "diagnostics": [
                {
                    "kind": d.kind.value,
                    "line": d.line,
                    "column": d.column,
                    "message": d.message,
                    "location": str(d.location(self.filename)),
                }
                for d in self.outcome.diagnostics
            ],
            "total": self.summary.total,
            "elapsed_ms": self.outcome.elapsed_ms,
        }


def transpile_string(content: str, filename: str = "<string>") -> RewriteResult:
    """Reescreve texto ZeptoN em Java sem compilar."""
    return rewrite(content, filename)


def compile_string(
    content: str,
    filename: str = "<string>",
    options: Optional[CompilerOptions] = None,
    service: Optional[CompilerService] = None,
) -> MemoryCompilationResult:
    """
    Reescreve e compila texto ZeptoN.

    Args:
        content: codigo ZeptoN
        filename: nome exibido nos diagnosticos
        options: opcoes de compilacao (padrao: depuracao completa)
        service: servico de compilacao (padrao: JavacService)

    Raises:
        MalformedUnit: marcadores estruturais ausentes
        ToolchainInvocationError: falha ao executar o compilador
    """
    options = options or CompilerOptions()
    service = service if service is not None else JavacService()
    rewritten = rewrite(content, filename)
    outcome = service.compile(rewritten.unit_name, rewritten.java_source, options.compile_options())

    summary = DiagnosticSummary()
    for diagnostic in outcome.diagnostics:
        summary.record(diagnostic.kind)

    return MemoryCompilationResult(
        filename=filename,
        rewrite=rewritten,
        outcome=outcome,
        summary=summary,
    )
