"""
errors.py - Taxonomia de erros do transcompilador zep

Proposito:
    Definir as excecoes de uso, configuracao, arquivo, reescrita e
    invocacao do compilador externo. Cada erro carrega a mensagem pronta
    para exibicao e o status de processo correspondente.

Componentes principais:
    - ZepError: base com mensagem e status
    - UsageError, ConfigConflict, UnknownFlag, FileOrderError: argumentos
    - File*Error: validacao de arquivos de entrada
    - MalformedUnit: marcador estrutural ausente ou duplicado
    - ToolchainInvocationError: falha ao chamar o javac

Exemplo de uso:
    raise UnknownFlag(message="Zep option: '-x' is not recognized.")

Notas de implementacao:
    - Todos os erros sao fatais (PROBLEM), exceto ToolchainInvocationError,
      que rejeita apenas a unidade corrente (FAILURE).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from zepton.model.results import ProcessStatus


@dataclass
class ZepError(Exception):
    message: str
    STATUS: ClassVar[ProcessStatus] = ProcessStatus.PROBLEM

    def __str__(self) -> str:
        return self.message

    @property
    def status(self) -> ProcessStatus:
        return self.STATUS


class UsageError(ZepError):
    """Nenhum argumento ou nenhum arquivo fonte informado."""


class ConfigConflict(ZepError):
    """Modos de verbosidade mutuamente exclusivos solicitados juntos."""


class UnknownFlag(ZepError):
    """Opcao nao reconhecida."""


class FileOrderError(ZepError):
    """Opcao apos o inicio da lista de arquivos."""


class FileExtensionError(ZepError):
    """Arquivo sem extensao .zep."""


class FileMissingError(ZepError):
    pass


class FileUnreadableError(ZepError):
    pass


class FileTooSmallError(ZepError):
    pass


@dataclass
class MalformedUnit(ZepError):
    """
    A reescrita nao localizou (ou encontrou repetido) um marcador estrutural.

    Attributes:
        marker: marcador em falta, por exemplo 'prog' ou '{'
        filename: unidade de origem
    """

    marker: str = ""
    filename: str = "<string>"

    def __str__(self) -> str:
        return f"{self.filename}: {self.message}"


class ToolchainInvocationError(ZepError):
    """A chamada ao compilador externo falhou antes de produzir resultado."""

    STATUS: ClassVar[ProcessStatus] = ProcessStatus.FAILURE
