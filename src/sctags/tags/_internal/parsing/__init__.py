"""Syntax tree providers."""

from sctags.tags._internal.parsing.treesitter import ScalaSyntaxParser

__all__ = ["ScalaSyntaxParser"]
