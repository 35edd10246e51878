"""
transformer.py - Reescrita estrutural ZeptoN -> Java

Proposito:
    Transformar o texto de uma unidade ZeptoN em uma unica unidade de
    compilacao Java: classe final publica, imports pre-definidos, bloco de
    suporte, construtor privado, main canonico e epilogo de tratamento de
    excecoes.

Componentes principais:
    - rewrite: funcao pura texto -> RewriteResult
    - ZeptonRewriter: aplica as edicoes calculadas a partir dos marcadores

Dependencias criticas:
    - zepton.rewriter.lexer: localizacao dos marcadores
    - zepton.rewriter.prelude: trechos Java injetados

Exemplo de uso:
    from zepton.rewriter import rewrite
    result = rewrite('prog Hi { begin println("hi"); }', "hi.zep")
    result.program_name  # 'Hi'

Notas de implementacao:
    - Edicoes sao aplicadas de tras para frente para nao invalidar offsets.
    - Nenhuma edicao insere quebra de linha: a linha N do corpo original
      continua sendo a linha N do texto Java.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from zepton.model.nodes import RewriteResult
from zepton.rewriter.lexer import BEGIN_KEYWORD, ENTRY_POINT, PROG_KEYWORD, Markers, scan_markers
from zepton.rewriter.prelude import (
    CLASS_KEYWORD,
    EPILOGUE,
    IMPORTS,
    RENAMED_ENTRY_POINT,
    entry_point,
)

Edit = Tuple[int, int, str]


@dataclass(frozen=True)
class ZeptonRewriter:
    filename: str = "<string>"

    def rewrite(self, text: str) -> RewriteResult:
        markers = scan_markers(text, self.filename)
        java_source = self._apply(text, self._edits(markers))
        return RewriteResult(
            java_source=java_source,
            program_name=markers.program_name,
            package_name=markers.package_name,
            has_package=markers.package is not None,
        )

    def _edits(self, markers: Markers) -> List[Edit]:
        edits: List[Edit] = [
            (
                markers.prog,
                markers.prog + len(PROG_KEYWORD),
                IMPORTS + CLASS_KEYWORD,
            ),
            (
                markers.begin,
                markers.begin + len(BEGIN_KEYWORD),
                entry_point(markers.program_name),
            ),
            (markers.close_brace, markers.close_brace + 1, EPILOGUE),
        ]
        edits.extend((pos, pos, " ") for pos in markers.bare_braces)
        edits.extend(
            (pos, pos + len(ENTRY_POINT), RENAMED_ENTRY_POINT)
            for pos in markers.entry_points
        )
        return edits

    def _apply(self, text: str, edits: List[Edit]) -> str:
        result = text
        for start, end, replacement in sorted(edits, key=lambda e: e[0], reverse=True):
            result = result[:start] + replacement + result[end:]
        return result


def rewrite(text: str, filename: str = "<string>") -> RewriteResult:
    """Reescreve texto ZeptoN em Java. Funcao pura: mesma entrada, mesma saida."""
    return ZeptonRewriter(filename).rewrite(text)
