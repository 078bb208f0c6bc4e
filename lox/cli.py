"""
Command-line driver for Lox.

    pylox               interactive prompt, one expression per line
    pylox script.lox    parse a file and print its tree

Exit codes follow the BSD sysexits convention: 64 for bad usage, 65 when
the input had syntax errors.

Author: xwest
"""

import sys
import argparse
from typing import List, Optional, TextIO

from .lexer import Lexer, ErrorReporter
from .parser import Parser
from .ast_printer import AstPrinter

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: pylox [script]"


class LoxRunner:
    """
    Runs source text through lexer, parser and printer.

    One ErrorReporter is shared by every stage of a run; run_prompt()
    resets it after each line so one bad line does not poison the next.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.stdout = stdout
        self.reporter = ErrorReporter(stderr)
        self.printer = AstPrinter()

    @property
    def had_error(self) -> bool:
        return self.reporter.had_error

    def run(self, source: str):
        """Parse one unit of input and print its tree if it was valid."""
        tokens = Lexer(source, self.reporter).tokenize()
        result = Parser(tokens, self.reporter).parse()

        # Stop if there was a syntax error
        if self.reporter.had_error:
            return

        try:
            text = self.printer.print(result.expression)
        except ValueError as e:
            self.reporter.error_at_line(tokens[-1].line, str(e))
            return

        self._write(text + "\n")

    def run_file(self, path: str) -> int:
        with open(path, "r", encoding="utf-8") as f:
            self.run(f.read())

        return EX_DATAERR if self.reporter.had_error else 0

    def run_prompt(self, stdin: Optional[TextIO] = None) -> int:
        stdin = stdin if stdin is not None else sys.stdin

        while True:
            self._write("> ")
            line = stdin.readline()
            if not line:
                break
            self.run(line)
            self.reporter.reset()

        return 0

    def _write(self, text: str):
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(text)
        stream.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pylox command"""

    parser = argparse.ArgumentParser(
        prog="pylox",
        add_help=False,
        usage="pylox [script]",
        description="Parse Lox expressions and print their syntax trees.",
    )
    parser.add_argument('script', nargs='*',
                        help='Lox source file to run (omit for an interactive prompt)')

    # Unknown options are usage errors, not argparse's exit status 2
    args, extras = parser.parse_known_args(argv)

    if extras or len(args.script) > 1:
        print(USAGE)
        return EX_USAGE

    runner = LoxRunner()

    if args.script:
        try:
            return runner.run_file(args.script[0])
        except OSError as e:
            print(f"Could not read '{args.script[0]}': {e.strerror}", file=sys.stderr)
            return EX_NOINPUT

    try:
        return runner.run_prompt()
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
