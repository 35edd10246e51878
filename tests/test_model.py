"""
test_model.py - Testes dos registros do modelo

Cobre SourceLocation, a localizacao de diagnosticos e os campos de
CompileOutcome.
"""

from zepton.model.results import CompileOutcome, Diagnostic, DiagnosticKind, SourceLocation


class TestSourceLocation:
    def test_str(self):
        assert str(SourceLocation("hello.zep", 3, 13)) == "hello.zep:3:13"

    def test_to_dict(self):
        location = SourceLocation("hello.zep", 1, 2)
        assert location.to_dict() == {"file": "hello.zep", "line": 1, "column": 2}

    def test_diagnostic_location(self):
        diagnostic = Diagnostic(DiagnosticKind.ERROR, 3, 13, "cannot find symbol\nsymbol: x")

        assert diagnostic.location("oops.zep") == SourceLocation("oops.zep", 3, 13)
        assert diagnostic.has_position
        assert diagnostic.headline == "cannot find symbol"

    def test_unpositioned_diagnostic(self):
        note = Diagnostic(DiagnosticKind.NOTE, 0, 0, "Recompile with -Xlint.")

        assert str(note.location("a.zep")) == "a.zep:0:0"
        assert not note.has_position


class TestCompileOutcome:
    def test_defaults(self):
        outcome = CompileOutcome(accepted=True)
        assert outcome.diagnostics == ()
        assert outcome.elapsed_ms == 0

    def test_elapsed_ms(self):
        assert CompileOutcome(False, (), 42).elapsed_ms == 42
