"""
Joxy Package

Front end for the Joxy scripting language.

Architecture:
    joxy/
    ├── lexer/           # Tokenization and lexical analysis
    ├── utils/           # Logging setup
    └── cli.py           # Script runner and interactive prompt

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@joxy.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, scan

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
