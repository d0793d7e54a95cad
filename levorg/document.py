"""Line buffer holding the text being edited."""

from typing import Optional

from .constants import EditorConstants


def split_lines(text: str) -> list[str]:
    """Split text on line terminators.

    A '\\r' directly before a '\\n' belongs to the terminator. A trailing
    terminator ends the last line instead of opening a new empty one, and
    empty text yields a single empty line.
    """
    if not text:
        return [""]
    lines = text.split(EditorConstants.LINE_TERMINATOR)
    last = lines.pop()
    # Every remaining segment was followed by a terminator
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


class Document:
    """An ordered, never empty, sequence of lines.

    Positions are (row, col) pairs where col may equal the line length,
    meaning the insertion point after the last character.
    """

    _lines: list[str]
    dirty: bool

    def __init__(self, lines: Optional[list[str]] = None):
        self._lines = list(lines) if lines else [""]
        self.dirty = False

    @classmethod
    def load(cls, text: str) -> "Document":
        """Create a clean document from loaded file content."""
        return cls(split_lines(text))

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def insert_char(self, row: int, col: int, ch: str) -> None:
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self.dirty = True

    def delete_backward(self, row: int, col: int) -> tuple[int, int]:
        """Delete the character before (row, col).

        At the start of a line the line is joined onto the previous one.
        Nothing happens at the start of the document.

        Returns:
            The cursor position after the deletion.
        """
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[:col - 1] + line[col:]
            self.dirty = True
            return (row, col - 1)
        if row > 0:
            previous = self._lines[row - 1]
            self._lines[row - 1] = previous + self._lines.pop(row)
            self.dirty = True
            return (row - 1, len(previous))
        return (row, col)

    def split_line(self, row: int, col: int) -> tuple[int, int]:
        """Move the text after col onto a new line below row.

        Returns:
            The cursor position at the start of the new line.
        """
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self.dirty = True
        return (row + 1, 0)

    def serialize(self) -> str:
        return EditorConstants.LINE_TERMINATOR.join(self._lines)

    def mark_saved(self) -> None:
        self.dirty = False
