from dataclasses import dataclass
from typing import Optional

from .document import Document


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0

    def move_left(self, document: Document) -> None:
        # No wrap to the previous line
        if self.col > 0:
            self.col -= 1

    def move_right(self, document: Document) -> None:
        # No wrap to the next line
        if self.col < document.line_length(self.row):
            self.col += 1

    def move_up(self, document: Document) -> None:
        if self.row > 0:
            self.row -= 1
            self.clamp_col(document)

    def move_down(self, document: Document) -> None:
        if self.row + 1 < document.line_count:
            self.row += 1
            self.clamp_col(document)

    def clamp_col(self, document: Document) -> None:
        """Pull col back inside the current line.

        The previous column is not remembered, so moving through a short
        line loses the original column for good.
        """
        self.col = min(self.col, document.line_length(self.row))

    def move_to(self, position: tuple[int, int]) -> None:
        self.row, self.col = position


@dataclass
class Viewport:
    scroll_row: int = 0
    scroll_col: int = 0


def reconcile_viewport(viewport: Viewport, cursor: CursorPosition,
                       visible_height: int, visible_width: Optional[int] = None) -> None:
    """Scroll the viewport just enough to keep the cursor visible.

    Args:
        viewport: Viewport to adjust in place
        cursor: Current cursor position
        visible_height: Number of text rows on screen
        visible_width: Number of text columns on screen. Horizontal
            scrolling only happens when this is given.
    """
    height = max(1, visible_height)
    if cursor.row < viewport.scroll_row:
        viewport.scroll_row = cursor.row
    elif cursor.row >= viewport.scroll_row + height:
        viewport.scroll_row = cursor.row - height + 1

    if visible_width is None:
        return
    width = max(1, visible_width)
    if cursor.col < viewport.scroll_col:
        viewport.scroll_col = cursor.col
    elif cursor.col >= viewport.scroll_col + width:
        viewport.scroll_col = cursor.col - width + 1
