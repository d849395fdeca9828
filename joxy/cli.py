#!/usr/bin/env python3
"""
Command-line driver for Joxy.

    joxy script.jx      # scan a file, print its tokens
    joxy                # interactive prompt, one line at a time

Exit codes follow the BSD sysexits convention: 64 for bad usage,
65 when the script has lexical errors, 66 when it cannot be read.

Author: xwest
"""

import argparse
import logging
import sys
from typing import Optional, List, TextIO

from .lexer import ScanResult, scan, scan_file
from .utils.logging import get_logger, set_level

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64       # Command line usage error
EX_DATAERR = 65     # Data format error
EX_NOINPUT = 66     # Cannot open input

PROMPT = "> "


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports misuse with the usage line and exit 64."""

    def error(self, message):
        self.exit(EX_USAGE, "Usage: joxy [script]\n")


def report(result: ScanResult, out: TextIO = None, err: TextIO = None) -> None:
    """Print every token on ``out`` and every error on ``err``."""
    out = out or sys.stdout
    err = err or sys.stderr

    for token in result.tokens:
        print(token, file=out)

    for error in result.errors:
        print(error, file=err)


def run(source: str, out: TextIO = None, err: TextIO = None) -> ScanResult:
    """Scan one source text and print the outcome."""
    result = scan(source)
    report(result, out, err)
    return result


def run_file(path: str, encoding: Optional[str] = None,
             out: TextIO = None, err: TextIO = None) -> int:
    """
    Scan a script file.

    Returns:
        Process exit status
    """
    err = err or sys.stderr

    try:
        result = scan_file(path, encoding=encoding)
    except OSError as e:
        logger.debug("failed to read %s: %s", path, e)
        print(f"joxy: cannot read {path}: {e.strerror or e}", file=err)
        return EX_NOINPUT

    report(result, out, err)

    # Indicate an error in the exit code.
    if result.has_errors():
        return EX_DATAERR
    return EX_OK


def run_prompt(stdin: TextIO = None, out: TextIO = None, err: TextIO = None) -> int:
    """
    Read-scan-print loop. Each line is scanned on its own, so an error on
    one line does not carry over to the next.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        run(line.rstrip("\r\n"), out, err)

    return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the joxy command"""

    parser = _UsageParser(
        prog="joxy",
        description="Scan a Joxy script and print its tokens",
    )
    parser.add_argument("script", nargs="*",
                        help="script to scan; omit for an interactive prompt")
    parser.add_argument("--encoding", default=None,
                        help="source file encoding (default: platform encoding)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging on stderr")

    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    # Limit the argument list to 1.
    if len(args.script) > 1:
        print("Usage: joxy [script]")
        return EX_USAGE
    elif len(args.script) == 1:
        return run_file(args.script[0], encoding=args.encoding)

    try:
        return run_prompt()
    except KeyboardInterrupt:
        print()
        return EX_OK


if __name__ == "__main__":
    sys.exit(main())
