#!/usr/bin/env python3
"""
Monkey Command Line Interface

Provides the interactive REPL and a file/command front end. Each input
is lexed and parsed; the parsed statements are echoed back in their
printed form, and parser errors are reported instead when there are any.
"""

import sys
import argparse
from typing import List, Optional, TextIO

from . import __version__
from .lexer.lexer import Lexer
from .parser.parser import Parser

PROMPT = ">> "

ERROR_BANNER = "Woops! We ran into some monkey business here!"


def print_parser_errors(errors: List[str], output: TextIO):
    """Report parser errors, one per line, under a banner."""
    print(ERROR_BANNER, file=output)
    print(" parser errors:", file=output)
    for message in errors:
        print(f"\t{message}", file=output)


def print_tokens(lexer: Lexer, output: TextIO):
    """Dump every token up to and including EOF."""
    for token in lexer:
        print(f"{token}  {token.location}", file=output)


def evaluate_source(source: str, output: TextIO, error_output: TextIO,
                    filename: str = "<repl>", show_tokens: bool = False) -> bool:
    """
    Lex and parse one piece of source and report the result.

    Returns:
        True if the source parsed without errors
    """
    lexer = Lexer(source, filename)

    if show_tokens:
        print_tokens(lexer, output)
        for warning in lexer.warnings:
            print(str(warning), end="", file=error_output)
        return True

    parser = Parser(lexer)
    program = parser.parse_program()

    for warning in lexer.warnings:
        print(str(warning), end="", file=error_output)

    if parser.has_errors():
        print_parser_errors(parser.errors, error_output)
        return False

    for statement in program.statements:
        print(statement.print(), file=output)
    return True


def start(input_stream: TextIO, output_stream: TextIO, prompt: str = PROMPT,
          show_tokens: bool = False, error_stream: Optional[TextIO] = None):
    """
    Run the read-parse-print loop until the input is exhausted.

    Args:
        input_stream: Where lines are read from
        output_stream: Where prompts and results are written
        prompt: Prompt printed before each line
        show_tokens: Dump tokens instead of parsing
        error_stream: Where diagnostics go (defaults to output_stream)
    """
    error_stream = error_stream or output_stream

    while True:
        output_stream.write(prompt)
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            output_stream.write("\n")
            return

        if line.strip() == "":
            continue

        evaluate_source(line, output_stream, error_stream, show_tokens=show_tokens)


def run_file(filename: str, show_tokens: bool = False) -> int:
    """Parse a Monkey source file and print the result."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Error reading file '{filename}': {e}", file=sys.stderr)
        return 2

    ok = evaluate_source(source, sys.stdout, sys.stderr, filename, show_tokens)
    return 0 if ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Monkey CLI."""
    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey programming language front end",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       # Start REPL
  %(prog)s script.monkey         # Parse a file and print its statements
  %(prog)s --tokens script.monkey
  %(prog)s -c "let x = 5;"       # Parse a single command
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Monkey source file to parse')
    parser.add_argument('-c', '--command',
                        help='Parse a single command')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream instead of parsing')
    parser.add_argument('--prompt', default=PROMPT,
                        help='REPL prompt (default: %(default)r)')
    parser.add_argument('-v', '--version', action='version',
                        version=f'Monkey {__version__}')

    args = parser.parse_args(argv)

    if args.command is not None:
        ok = evaluate_source(args.command, sys.stdout, sys.stderr, "<command>", args.tokens)
        return 0 if ok else 1

    if args.file:
        return run_file(args.file, args.tokens)

    print("Hello, this is the Monkey programming language!")
    print("Feel free to type in commands")
    start(sys.stdin, sys.stdout, args.prompt, args.tokens, sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
