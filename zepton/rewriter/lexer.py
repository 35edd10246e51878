"""
lexer.py - Scanner estrutural de unidades ZeptoN

Proposito:
    Carregar os terminais de zepton.lark e localizar os marcadores
    estruturais que a reescrita precisa: declaracao de pacote, palavra
    chave prog, chave de abertura do programa, begin e chave final.

Componentes principais:
    - load_grammar/create_lexer: leitura e construcao do lexer Lark
    - tokenize: tokens significativos (sem espacos e comentarios)
    - scan_markers: offsets dos marcadores com falhas tipadas

Dependencias criticas:
    - lark: lexer basico e excecoes de caractere inesperado
    - importlib.resources: acesso a gramatica empacotada

Exemplo de uso:
    from zepton.rewriter.lexer import scan_markers
    markers = scan_markers('prog Hi { begin println("hi"); }')
    markers.program_name  # 'Hi'

Notas de implementacao:
    - Palavras chave so contam como identificadores inteiros, fora de
      literais e comentarios.
    - prog e begin devem ocorrer exatamente uma vez; begin deve vir depois
      da chave do programa e a chave final depois de begin.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import List, Optional, Sequence, Tuple

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from zepton.errors import MalformedUnit

logger = logging.getLogger(__name__)

PROG_KEYWORD = "prog"
BEGIN_KEYWORD = "begin"
PACKAGE_KEYWORD = "package"
ENTRY_POINT = "main"

IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass(frozen=True)
class Markers:
    """
    Offsets (em caracteres) dos marcadores de uma unidade ZeptoN.

    Attributes:
        prog: inicio da palavra chave prog
        open_brace: chave de abertura que segue prog
        begin: inicio da palavra chave begin
        close_brace: ultima chave de fechamento da unidade
        program_name: texto entre prog e sua chave, sem espacos
        package: (inicio de 'package', posicao do ';') quando presente
        package_name: qualificador entre package e ';'
        bare_braces: chaves '{' sem espaco imediatamente antes
        entry_points: identificadores 'main' seguidos de '(' a renomear
    """

    prog: int
    open_brace: int
    begin: int
    close_brace: int
    program_name: str
    package: Optional[Tuple[int, int]] = None
    package_name: str = ""
    bare_braces: Tuple[int, ...] = ()
    entry_points: Tuple[int, ...] = ()


@lru_cache(maxsize=1)
def load_grammar() -> str:
    """Carrega o arquivo zepton.lark a partir do pacote zepton.grammar."""
    grammar_path = resources.files("zepton.grammar").joinpath("zepton.lark")
    return grammar_path.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def create_lexer() -> Lark:
    """Cria o Lark com lexer basico; apenas Lark.lex() e usado."""
    return Lark(load_grammar(), parser="lalr", lexer="basic")


def tokenize(text: str, filename: str = "<string>") -> List[Token]:
    try:
        return list(create_lexer().lex(text))
    except UnexpectedCharacters as exc:
        raise MalformedUnit(
            message=f"Unexpected character {exc.char!r} at line {exc.line}, column {exc.column}.",
            marker=exc.char,
            filename=filename,
        ) from exc


def scan_markers(text: str, filename: str = "<string>") -> Markers:
    tokens = tokenize(text, filename)

    prog_idx = _single_keyword(tokens, PROG_KEYWORD, filename)
    brace_idx = _next_of_type(tokens, prog_idx + 1, "LBRACE")
    if brace_idx is None:
        raise MalformedUnit(
            message="Opening brace '{' after 'prog' not found.",
            marker="{",
            filename=filename,
        )

    prog = tokens[prog_idx]
    open_brace = tokens[brace_idx]
    program_name = text[prog.end_pos:open_brace.start_pos].strip()
    if not IDENTIFIER_RE.fullmatch(program_name):
        raise MalformedUnit(
            message=f"Program name '{program_name}' is not a valid identifier.",
            marker="program name",
            filename=filename,
        )

    begin_idx = _single_keyword(tokens, BEGIN_KEYWORD, filename)
    if begin_idx < brace_idx:
        raise MalformedUnit(
            message="Keyword 'begin' must follow the program's opening brace.",
            marker=BEGIN_KEYWORD,
            filename=filename,
        )

    close_idx = _last_of_type(tokens, "RBRACE")
    if close_idx is None or close_idx < begin_idx:
        raise MalformedUnit(
            message="Closing brace '}' after 'begin' not found.",
            marker="}",
            filename=filename,
        )

    package, package_name = _scan_package(text, tokens, prog_idx, filename)

    markers = Markers(
        prog=prog.start_pos,
        open_brace=open_brace.start_pos,
        begin=tokens[begin_idx].start_pos,
        close_brace=tokens[close_idx].start_pos,
        program_name=program_name,
        package=package,
        package_name=package_name,
        bare_braces=_bare_braces(text, tokens),
        entry_points=_entry_points(tokens),
    )
    logger.debug("Marcadores de %s: %s", filename, markers)
    return markers


def _is_keyword(token: Token, keyword: str) -> bool:
    return token.type == "IDENT" and token.value == keyword


def _single_keyword(tokens: Sequence[Token], keyword: str, filename: str) -> int:
    positions = [i for i, tok in enumerate(tokens) if _is_keyword(tok, keyword)]
    if not positions:
        raise MalformedUnit(
            message=f"Keyword '{keyword}' not found.",
            marker=keyword,
            filename=filename,
        )
    if len(positions) > 1:
        duplicate = tokens[positions[1]]
        raise MalformedUnit(
            message=f"Keyword '{keyword}' repeated at line {duplicate.line}.",
            marker=keyword,
            filename=filename,
        )
    return positions[0]


def _next_of_type(tokens: Sequence[Token], start: int, token_type: str) -> Optional[int]:
    for i in range(start, len(tokens)):
        if tokens[i].type == token_type:
            return i
    return None


def _last_of_type(tokens: Sequence[Token], token_type: str) -> Optional[int]:
    for i in range(len(tokens) - 1, -1, -1):
        if tokens[i].type == token_type:
            return i
    return None


def _scan_package(
    text: str,
    tokens: Sequence[Token],
    prog_idx: int,
    filename: str,
) -> Tuple[Optional[Tuple[int, int]], str]:
    for i in range(prog_idx):
        if not _is_keyword(tokens[i], PACKAGE_KEYWORD):
            continue
        semi_idx = _next_of_type(tokens, i + 1, "SEMI")
        if semi_idx is None or semi_idx > prog_idx:
            raise MalformedUnit(
                message="Package declaration is missing its ';'.",
                marker=";",
                filename=filename,
            )
        keyword, semi = tokens[i], tokens[semi_idx]
        qualifier = text[keyword.end_pos:semi.start_pos].strip()
        if not qualifier:
            raise MalformedUnit(
                message="Package declaration has no name.",
                marker=PACKAGE_KEYWORD,
                filename=filename,
            )
        return (keyword.start_pos, semi.start_pos), qualifier
    return None, ""


def _bare_braces(text: str, tokens: Sequence[Token]) -> Tuple[int, ...]:
    return tuple(
        tok.start_pos
        for tok in tokens
        if tok.type == "LBRACE" and tok.start_pos > 0 and not text[tok.start_pos - 1].isspace()
    )


def _entry_points(tokens: Sequence[Token]) -> Tuple[int, ...]:
    """Chamadas/declaracoes de main, somente se ha um 'static void main'."""
    declared = any(
        _is_keyword(tokens[i], "static")
        and _is_keyword(tokens[i + 1], "void")
        and _is_keyword(tokens[i + 2], ENTRY_POINT)
        for i in range(len(tokens) - 2)
    )
    if not declared:
        return ()
    return tuple(
        tokens[i].start_pos
        for i in range(len(tokens) - 1)
        if _is_keyword(tokens[i], ENTRY_POINT) and tokens[i + 1].type == "LPAR"
    )
