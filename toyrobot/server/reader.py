"""
Command reader over a line-oriented text source.

The source is any iterable of strings: an open text file, ``sys.stdin``,
``io.StringIO`` or a plain list of lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from toyrobot.config import TRACE
from toyrobot.protocol.tokenizer import tokenize

logger = logging.getLogger(__name__)


class CommandReader:
    """Pulls raw lines from a source and yields non-empty token sequences."""

    def __init__(self, source: Iterable[str]):
        self._lines: Iterator[str] = iter(source)
        self.line_count: int = 0
        self.exhausted: bool = False

    def read_command(self) -> list[str]:
        """
        Read the next command from the source, skipping blank lines.

        Returns:
            Tokenized command text, or an empty list once the source is exhausted
        """
        if self.exhausted:
            return []
        for line in self._lines:
            self.line_count += 1
            tokens = tokenize(line)
            if tokens:
                logger.log(TRACE, "line %d: %s", self.line_count, tokens)
                return tokens
        self.exhausted = True
        logger.debug(f"Input exhausted after {self.line_count} lines")
        return []

    def __iter__(self) -> Iterator[list[str]]:
        while True:
            tokens = self.read_command()
            if not tokens:
                return
            yield tokens
