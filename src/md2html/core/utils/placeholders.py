"""Opaque placeholder tokens standing in for already-rendered HTML.

A token is ``\\x00<KIND><index>\\x00``. NUL never survives input normalization,
so a token cannot be produced by user text. Tokens carry no markdown syntax
characters, so later rewrites pass over them untouched.
"""

import re


SENTINEL = '\x00'


class PlaceholderTable:
    """Per-call, index-addressed store of rendered HTML fragments of one kind."""

    def __init__(self, kind: str):
        if not kind.isalpha():
            raise ValueError(f"Placeholder kind must be alphabetic, got {kind!r}")
        self.kind = kind
        self.items: list[str] = []
        self.sources: list[str] = []     # markdown each item was rendered from
        self._pattern = re.compile(f'{SENTINEL}{kind}(\\d+){SENTINEL}')

    def add(self, html: str, source: str = None) -> str:
        """Store html (and the markdown it came from) and return its token."""
        self.items.append(html)
        self.sources.append(html if source is None else source)
        return self.token(len(self.items) - 1)

    def token(self, index: int) -> str:
        return f'{SENTINEL}{self.kind}{index}{SENTINEL}'

    def is_token(self, line: str) -> bool:
        """True if line (ignoring surrounding whitespace) is exactly one token."""
        return self._pattern.fullmatch(line.strip()) is not None

    def find(self, text: str) -> list[int]:
        """Return the indices of all tokens in text, in order of appearance."""
        return [int(m.group(1)) for m in self._pattern.finditer(text)]

    def restore(self, text: str, source: bool = False) -> str:
        """Substitute every token in text with its stored HTML, byte for byte.

        With source=True the original markdown is put back instead.
        """
        stored = self.sources if source else self.items
        return self._pattern.sub(lambda m: stored[int(m.group(1))], text)
