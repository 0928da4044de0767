"""Snippet Registry.

The registry holds an ordered collection of named snippets and runs them one
after another, collecting their output as log lines.

1. Snippets
A snippet is a name plus a zero-argument callable. Calling the body yields the
text lines the snippet wants to show, usually from a generator function so that
lines produced before a failure are still recorded. Snippets are immutable once
registered and names are unique within a registry.

2. Execution Model
`run_all()` walks the snippets in registration order. Every line produced is
wrapped in a `LogLine` carrying the snippet name and a run-wide sequence
number. Execution is strictly sequential and single-threaded.

3. Error Handling
Any `Exception` raised by a body (a `RuntimeError`, `UseAfterReleaseError`,
`KeyError`, ...) is caught, logged, and recorded as one error line for that
snippet; the run then continues with the next snippet. A body that returns a
plain string instead of lines fails the same way with `TypeError`.
`KeyboardInterrupt` and other `BaseException` types still propagate.
Registration of a duplicate name raises `DuplicateNameError`.


File: registry.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from closurelab.exceptions import DuplicateNameError

logger = logging.getLogger(__name__)


SnippetBody = Callable[[], Iterable[str]]


@dataclass(frozen=True)
class Snippet:
    """A named, executable unit of the tutorial."""

    name: str
    body: SnippetBody


@dataclass(frozen=True)
class LogLine:
    """A single line of snippet output."""

    source_snippet: str
    text: str
    sequence: int
    is_error: bool = False


@dataclass
class RunResult:
    """Output of one pass over the registry."""

    lines: list[LogLine] = field(default_factory=list)
    failures: int = 0

    @property
    def ok(self) -> bool:
        return self.failures == 0

    @property
    def errors(self) -> list[LogLine]:
        return [line for line in self.lines if line.is_error]

    def lines_for(self, name: str) -> list[LogLine]:
        """
        Return the lines produced by a single snippet, in order.
        """
        return [line for line in self.lines if line.source_snippet == name]


class Registry:
    """Ordered collection of snippets."""

    def __init__(self, name: str = "<registry>"):
        self.name = name
        self._snippets: dict[str, Snippet] = {}

    def __len__(self) -> int:
        return len(self._snippets)

    def __contains__(self, name: object) -> bool:
        return name in self._snippets

    def __iter__(self):
        return iter(self._snippets.values())

    @property
    def names(self) -> list[str]:
        return list(self._snippets)

    def register(self, name: str, body: SnippetBody) -> Snippet:
        """
        Add a snippet to the end of the run order.

        Args:
            name (str): Unique snippet name.
            body (callable): Zero-argument callable yielding text lines.

        Returns:
            Snippet: The registered snippet.

        Raises:
            DuplicateNameError: If a snippet with the same name already exists.
            TypeError: If the body is not callable.
        """
        if name in self._snippets:
            raise DuplicateNameError(name, "snippet", self.name)
        if not callable(body):
            raise TypeError(f"Snippet '{name}' body is not callable")
        snippet = Snippet(name, body)
        self._snippets[name] = snippet
        return snippet

    def snippet(self, name: str | None = None):
        """
        Decorator form of `register`. The function name is used when no name
        is given. The decorated function is returned unchanged.
        """
        def decorator(body: SnippetBody) -> SnippetBody:
            self.register(name or body.__name__, body)
            return body
        return decorator

    def run_all(self) -> RunResult:
        """
        Run every snippet in registration order.

        Returns:
            RunResult: The collected lines and the number of failed snippets.
        """
        result = RunResult()

        def append(snippet_name: str, text: str, is_error: bool = False) -> None:
            result.lines.append(
                LogLine(snippet_name, str(text), len(result.lines), is_error)
            )

        for snippet in self._snippets.values():
            logger.debug("Running snippet '%s'", snippet.name)
            try:
                output = snippet.body()
                if isinstance(output, (str, bytes)):
                    raise TypeError(
                        f"Snippet '{snippet.name}' must return an iterable of lines, "
                        f"not {type(output).__name__}"
                    )
                for text in output or ():
                    append(snippet.name, text)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning("Snippet '%s' failed: %s", snippet.name, e)
                result.failures += 1
                append(snippet.name, f"{type(e).__name__}: {e}", is_error=True)

        logger.debug(
            "Ran %d snippets with %d failures", len(self._snippets), result.failures
        )
        return result
