# sqllint/script.py
"""
Source script wrapper.

A Script holds the raw DDL text and a read cursor. The cursor is the
character offset of the first text not yet scanned by the location
resolver; it only moves forward. The engine hands every rule its own fork
so one rule never observes another rule's cursor.
"""
import bisect


class Script:
    def __init__(self, name: str, data: str, cursor: int = 0):
        self.name = name
        self.data = data
        self.cursor = cursor
        self._lines = None
        self._starts = None

    def _split(self):
        # lines and their start offsets are computed once and shared by forks
        lines = self.data.split("\n")
        starts = []
        offset = 0
        for ln in lines:
            starts.append(offset)
            offset += len(ln) + 1
        self._lines = lines
        self._starts = starts

    @property
    def lines(self):
        if self._lines is None:
            self._split()
        return self._lines

    @property
    def line_starts(self):
        if self._starts is None:
            self._split()
        return self._starts

    def fork(self, cursor: int = 0) -> "Script":
        """Return a Script over the same text with its own cursor."""
        other = Script(self.name, self.data, cursor)
        other._lines = self.lines
        other._starts = self.line_starts
        return other

    def line_index(self, offset: int) -> int:
        """0-based index of the line holding ``offset``."""
        return bisect.bisect_right(self.line_starts, offset) - 1

    def find(self, text: str) -> int:
        """Offset of ``text`` at or after the cursor, -1 if absent."""
        return self.data.find(text, self.cursor)

    def advance(self, line_idx: int):
        """Move the cursor to the start of the line after ``line_idx``."""
        nxt = line_idx + 1
        if nxt < len(self.line_starts):
            offset = self.line_starts[nxt]
        else:
            offset = len(self.data)
        if offset > self.cursor:
            self.cursor = offset

    def __repr__(self):
        return f"Script({self.name!r}, cursor={self.cursor})"
