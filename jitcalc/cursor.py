"""
Peekable character stream over one input line.
"""

from typing import Iterator, Optional


class Cursor:
    """Forward-only cursor with one character of lookahead."""

    def __init__(self, text: str):
        self._chars: Iterator[str] = iter(text)
        self._lookahead: Optional[str] = None
        self._buffered = False

    def peek(self) -> Optional[str]:
        if not self._buffered:
            self._lookahead = next(self._chars, None)
            self._buffered = True
        return self._lookahead

    def advance(self) -> Optional[str]:
        c = self.peek()
        self._buffered = False
        self._lookahead = None
        return c

    def skip_whitespace(self) -> None:
        c = self.peek()
        while c is not None and c.isspace():
            self.advance()
            c = self.peek()
