"""
Joxy Lexer Package

Implements the lexical analyzer (scanner) for the Joxy language: a single
pass over the source text that produces classified tokens and collects
lexical errors instead of stopping at the first one.

Key Features:
- Maximal munch for operators, identifiers and numbers
- Line comments and non-nesting block comments
- Multi-line string literals
- Line tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, ScanResult, scan, scan_file
from .errors import (
    LexerError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedBlockCommentError,
)

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "scan_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedBlockCommentError",
]
