"""
nodes.py - Estruturas de dados das unidades ZeptoN

Proposito:
    Definir a unidade de fonte lida do disco e o resultado da reescrita
    estrutural para Java. Centraliza os tipos trocados entre reescritor,
    orquestrador e servico de compilacao.

Componentes principais:
    - SourceUnit: texto ZeptoN e nome do arquivo de origem
    - RewriteResult: texto Java gerado e metadados extraidos

Dependencias criticas:
    - dataclasses: estruturacao imutavel
    - pathlib: leitura de arquivos

Exemplo de uso:
    from zepton.model.nodes import SourceUnit
    unit = SourceUnit.read("hello.zep")

Notas de implementacao:
    - Ambos os tipos sao imutaveis apos a criacao.
    - unit_name preserva a regra historica de nome logico do zep.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from zepton.errors import FileUnreadableError

SOURCE_ENCODING = "utf-8"


@dataclass(frozen=True)
class SourceUnit:
    path: str
    text: str

    @property
    def name(self) -> str:
        return self.path

    @classmethod
    def read(cls, path: str | Path) -> "SourceUnit":
        """Le o arquivo .zep como texto UTF-8."""
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=SOURCE_ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileUnreadableError(
                message=f"File: '{path}' is unreadable ({exc})."
            ) from exc
        return cls(path=str(path), text=text)


@dataclass(frozen=True)
class RewriteResult:
    """
    Resultado da reescrita de uma unidade ZeptoN.

    Attributes:
        java_source: unidade de compilacao Java completa
        program_name: nome logico extraido de `prog <Nome> {`
        package_name: qualificador de `package a.b;` (vazio se ausente)
        has_package: True quando havia declaracao de pacote
    """

    java_source: str
    program_name: str
    package_name: str = ""
    has_package: bool = False

    @property
    def unit_name(self) -> str:
        # Regra herdada do zep 1.0: com pacote usa apenas o nome do programa.
        if self.has_package:
            return self.program_name
        return f"{self.package_name}.{self.program_name}"

    def lines(self) -> List[str]:
        return self.java_source.split("\n")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "program_name": self.program_name,
            "package_name": self.package_name,
            "has_package": self.has_package,
            "unit_name": self.unit_name,
            "java_source": self.java_source,
        }
