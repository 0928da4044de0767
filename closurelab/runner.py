"""Runner.

Entry points for running the closures tutorial.

Workflow:
1. A fresh registry is built holding every lesson in teaching order.
2. The registry runs each lesson in turn, isolating failures per lesson.
3. The collected log lines are returned, or printed by the CLI.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys

from closurelab import config
from closurelab.registry import LogLine, Registry, RunResult
from closurelab.snippets import build_registry


def run_registry(registry: Registry | None = None) -> RunResult:
    """
    Run a registry, the tutorial registry by default.
    """
    if registry is None:
        registry = build_registry()
    return registry.run_all()


def run() -> list[LogLine]:
    """
    Run every tutorial lesson and return the log lines in order.
    """
    return run_registry().lines


def format_line(line: LogLine) -> str:
    template = config.ERROR_LINE_FORMAT if line.is_error else config.LINE_FORMAT
    return template.format(name=line.source_snippet, text=line.text)


def print_usage():
    """
    Print usage.
    """
    print()
    print("ClosureLab - closures tutorial runner")
    print()
    print("Usage:")
    print(f"    {config.PROGRAM_NAME}")
    print()
    print("Runs every lesson in order and prints its output. The exit code is")
    print("0 when every lesson succeeds, otherwise the number of failed lessons.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: run all lessons and print their output.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - Anything else: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if args:
        print_usage()
        return 1

    logging.basicConfig(format=config.LOG_FORMAT, level=config.LOG_LEVEL)
    result = run_registry()
    for line in result.lines:
        print(format_line(line))
    if result.failures:
        print(f"{result.failures} lesson(s) failed")
    return result.failures


def cli() -> None:
    """Console script entry point."""
    sys.exit(main(sys.argv))
