"""
zepton: Transcompilador ZeptoN -> Java

Reescreve programas ZeptoN (prog/begin) em uma classe Java final com
prelude de suporte, compila o resultado com o javac e reporta os
diagnosticos com linha, coluna e trecho do codigo gerado.

API em Memoria:
    >>> import zepton
    >>> result = zepton.transpile_string('prog Hi { begin println("hi"); }')
    >>> result.program_name
    'Hi'

Compilador CLI (zepton.ZeptonCompiler):
    >>> from zepton import ZeptonCompiler, parse_arguments
    >>> status = ZeptonCompiler(parse_arguments(["hello.zep"])).run()
"""

# API em memoria
from zepton.api import (
    MemoryCompilationResult,
    compile_string,
    transpile_string,
)

# Compilador
from zepton.compiler import UnitResult, ZeptonCompiler
from zepton.options import Action, CompilerOptions, VerbosityMode, parse_arguments
from zepton.toolchain import CompilerService, JavacService, parse_javac_output

# Tipos
from zepton.model.nodes import RewriteResult, SourceUnit
from zepton.model.results import (
    CompileOutcome,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSummary,
    ProcessStatus,
    SourceLocation,
)
from zepton.errors import MalformedUnit, ToolchainInvocationError, ZepError
from zepton.rewriter import rewrite

__version__ = "1.0.0"
__all__ = [
    # API em memoria
    "transpile_string",
    "compile_string",
    "MemoryCompilationResult",
    # Compilador
    "ZeptonCompiler",
    "UnitResult",
    "CompilerOptions",
    "VerbosityMode",
    "Action",
    "parse_arguments",
    "CompilerService",
    "JavacService",
    "parse_javac_output",
    "rewrite",
    # Tipos
    "SourceUnit",
    "RewriteResult",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSummary",
    "CompileOutcome",
    "ProcessStatus",
    "SourceLocation",
    "ZepError",
    "MalformedUnit",
    "ToolchainInvocationError",
]
