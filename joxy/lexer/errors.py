"""
Error handling for the Joxy lexer.

Lexical errors are collected rather than propagated: the scanner raises
them internally, records them, and keeps going so a single pass surfaces
every defect in the source text.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single reported problem, rendered as ``[line N] Error: message``."""
    message: str
    line: int
    severity: str = "error"
    code: Optional[str] = None
    where: str = ""
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"


class LexerError(Exception):
    """
    Base class for lexical errors.

    Contains the diagnostic used for error reporting. ``halts_scan`` tells
    the scan loop whether any further tokens can be produced after it.
    """

    halts_scan = False

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            code=code,
            help_text=help_text
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line={self.line}, message={self.message!r})"


class UnexpectedCharacterError(LexerError):
    """A character that starts no valid lexeme."""

    def __init__(self, char: str, line: int, help_text: Optional[str] = None):
        super().__init__(ERROR_CODES["L001"], line, code="L001", help_text=help_text)
        self.char = char


class UnterminatedStringError(LexerError):
    """Input ended inside a string literal; the partial lexeme is dropped."""

    def __init__(self, line: int):
        super().__init__(
            ERROR_CODES["L002"], line, code="L002",
            help_text='String literals must be closed with a matching " quote.'
        )


class UnterminatedBlockCommentError(LexerError):
    """Input ended inside /* ... */; nothing after it can be scanned."""

    halts_scan = True

    def __init__(self, line: int):
        super().__init__(
            ERROR_CODES["L003"], line, code="L003",
            help_text="Block comments must be closed with */."
        )


# Error codes and their messages
ERROR_CODES = {
    "L001": "Unexpected character.",
    "L002": "Unterminated string.",
    "L003": "Unterminated block comment.",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> UnexpectedCharacterError:
    """Create an error for a character that cannot start a token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Joxy source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(char, line, help_text=help_text)


def create_unterminated_string_error(line: int) -> UnterminatedStringError:
    """Create an error for a string literal that runs to end of input."""
    return UnterminatedStringError(line)


def create_unterminated_block_comment_error(line: int) -> UnterminatedBlockCommentError:
    """Create an error for a block comment that runs to end of input."""
    return UnterminatedBlockCommentError(line)
