"""
Read cursor over input text.

The cursor never owns or copies the text it walks; it only moves a scan
position forward. Offsets are character offsets into the original input.
"""

from typing import Optional

from .tokens import SourceLocation

WHITESPACE = frozenset(" \t\n\r\v\f")
DEFAULT_COMMENT_MARKER = "\\\\"


class Cursor:
    """A read-only text span plus a monotonically increasing scan position."""

    def __init__(self, text: str, filename: str = "<input>",
                 comment_marker: str = DEFAULT_COMMENT_MARKER):
        self.text = text
        self.filename = filename
        self.comment_marker = comment_marker
        self.offset = 0

    @property
    def size(self) -> int:
        return len(self.text)

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str:
        """Current character without advancing. Peeking past the end is a bug."""
        if self.offset >= len(self.text):
            raise IndexError(f"peek past end of input (offset {self.offset}, size {len(self.text)})")
        return self.text[self.offset]

    def advance(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("cursor only moves forward")
        self.offset = min(self.offset + count, len(self.text))

    def skip_whitespace(self) -> bool:
        """Skip spaces, tabs, newlines, CR, VT and FF. Returns True if anything was skipped."""
        start = self.offset
        while self.offset < len(self.text) and self.text[self.offset] in WHITESPACE:
            self.offset += 1
        return self.offset != start

    def skip_to_next_line(self) -> None:
        """Advance up to, not past, the next newline."""
        newline = self.text.find("\n", self.offset)
        self.offset = len(self.text) if newline == -1 else newline

    def skip_single_line_comment(self) -> bool:
        """Discard a comment running from the marker to the end of the line."""
        if self.text.startswith(self.comment_marker, self.offset):
            self.offset += len(self.comment_marker)
            self.skip_to_next_line()
            return True
        return False

    def skip_whitespace_and_comments(self) -> None:
        while self.skip_whitespace() | self.skip_single_line_comment():
            pass

    def compare_word_and_skip(self, word: str) -> bool:
        """Consume ``word`` if the upcoming text matches it exactly."""
        if word and self.text.startswith(word, self.offset):
            self.offset += len(word)
            return True
        return False

    def location(self, offset: Optional[int] = None) -> SourceLocation:
        """Line/column decomposition of ``offset`` (defaults to the cursor)."""
        if offset is None:
            offset = self.offset
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)

    def line_text(self, offset: Optional[int] = None) -> str:
        """The source line containing ``offset``, without its newline."""
        if offset is None:
            offset = self.offset
        line_start = self.text.rfind("\n", 0, offset) + 1
        line_end = self.text.find("\n", offset)
        if line_end == -1:
            line_end = len(self.text)
        return self.text[line_start:line_end]

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, size={len(self.text)})"
