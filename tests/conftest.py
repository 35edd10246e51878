"""
conftest.py - Fixtures compartilhadas para testes do zepton

Proposito:
    Fornecer caminhos de fixtures, um servico de compilacao falso e
    diagnosticos prontos para os testes do orquestrador e do CLI.

Dependencias criticas:
    - pytest: gerenciamento de fixtures
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

import pytest

from zepton.model.results import CompileOutcome, Diagnostic, DiagnosticKind


class FakeCompilerService:
    """
    Servico que devolve resultados pre-definidos e registra as chamadas.

    Uma excecao na lista de resultados e levantada na chamada correspondente.
    """

    def __init__(
        self,
        outcomes: Optional[Sequence[Union[CompileOutcome, Exception]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.outcomes: List[Union[CompileOutcome, Exception]] = list(outcomes or [])
        self.error = error
        self.calls: List[tuple] = []

    def compile(self, unit_name: str, java_source: str, options: Sequence[str]) -> CompileOutcome:
        self.calls.append((unit_name, java_source, list(options)))
        if self.error is not None:
            raise self.error
        if self.outcomes:
            outcome = self.outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        return CompileOutcome(accepted=True)


@pytest.fixture()
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture()
def fake_service():
    return FakeCompilerService


@pytest.fixture()
def undefined_symbol() -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.ERROR,
        line=3,
        column=13,
        message="cannot find symbol\nsymbol:   variable undefinedName\nlocation: class Oops",
    )


@pytest.fixture()
def write_unit(tmp_path: Path):
    """Escreve uma unidade .zep temporaria e devolve seu caminho."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
