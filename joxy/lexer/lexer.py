"""
Joxy Lexer - turns source text into tokens

Single forward pass with one or two characters of lookahead. Errors are
collected as they are found; only an unterminated block comment stops the
scan early, since nothing after it can be resynchronized.

xwest
"""

import locale
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import (
    Token, TokenType, LiteralValue, KEYWORDS, PUNCTUATION, EQUAL_SUFFIXED
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error, create_unterminated_block_comment_error
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ScanResult:
    """Tokens produced by one scan together with every error it recorded."""
    tokens: List[Token] = field(default_factory=list)
    errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Lexer:
    """
    Joxy lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    A Lexer owns its cursor state; create one per source text.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text to scan
        """
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Never raises for bad input; problems are recorded in ``self.errors``.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.tokens.clear()
        self.errors.clear()

        while not self._is_at_end():
            # We are at the beginning of the next lexeme.
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                logger.debug("recorded %s", e)
                self.errors.append(e)
                if e.halts_scan:
                    break

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug(
            "scanned %d characters into %d tokens with %d errors",
            len(self.source), len(self.tokens), len(self.errors)
        )
        return list(self.tokens)

    def _scan_token(self):
        c = self._advance()

        if c in PUNCTUATION:
            self._add_token(PUNCTUATION[c])
        elif c in EQUAL_SUFFIXED:
            single, double = EQUAL_SUFFIXED[c]
            self._add_token(double if self._match('=') else single)
        elif c == '/':
            self._slash()
        elif c in (' ', '\r', '\t'):
            # Ignore whitespace.
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            raise create_unexpected_character_error(c, self.line)

    def _slash(self):
        """Line comment, block comment, or the division operator."""
        if self._match('/'):
            # A comment goes until the end of the line.
            while self._peek() != '\n' and not self._is_at_end():
                self._advance()
        elif self._match('*'):
            self._block_comment()
        else:
            self._add_token(TokenType.SLASH)

    def _block_comment(self):
        # The first */ closes the comment; /* inside it has no meaning.
        while not self._is_at_end():
            if self._peek() == '*' and self._peek_next() == '/':
                self._advance()
                self._advance()
                return
            if self._advance() == '\n':
                self.line += 1

        raise create_unterminated_block_comment_error(self.line)

    def _string(self):
        while not self._is_at_end() and self._peek() != '"':
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # The closing "

        # Trim the surrounding quotes.
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # Look for a fractional part.
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()  # Consume the "."
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        while _is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def _peek(self) -> str:
        """Look at the next character without consuming it."""
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the next character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def scan(source: str) -> ScanResult:
    """
    Scan a complete source text.

    Args:
        source: Source code string

    Returns:
        ScanResult holding the token list (always EOF-terminated) and
        the lexical errors found, in source order
    """
    lexer = Lexer(source)
    tokens = lexer.tokenize()
    return ScanResult(tokens=tokens, errors=list(lexer.errors))


def scan_file(filepath: str, encoding: Optional[str] = None) -> ScanResult:
    """
    Scan a source file.

    Args:
        filepath: Path to source file
        encoding: Text encoding; defaults to the platform's preferred encoding

    Returns:
        ScanResult for the file contents

    Raises:
        OSError: If the file cannot be read
    """
    if encoding is None:
        encoding = locale.getpreferredencoding(False)

    # Undecodable bytes become U+FFFD and scan as unexpected characters.
    with open(filepath, 'r', encoding=encoding, errors='replace', newline='') as f:
        source = f.read()

    logger.debug("read %d characters from %s", len(source), filepath)
    return scan(source)
