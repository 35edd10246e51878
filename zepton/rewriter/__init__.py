from zepton.rewriter.lexer import Markers, scan_markers
from zepton.rewriter.transformer import ZeptonRewriter, rewrite

__all__ = ["Markers", "ZeptonRewriter", "rewrite", "scan_markers"]
