"""Projection of an editing session onto a screen frame.

project_frame is pure: it reads the session and returns a Frame describing
what to draw. The terminal turns the Frame into escape sequences.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import EditorConstants
from .session import ConfirmExitDialog, EditorSession, StatusKind, StatusMessage


@dataclass
class DialogOverlay:
    """A modal box drawn on top of the text, in screen coordinates."""
    title: str
    message: str
    actions: tuple[str, str]
    top: int
    left: int
    width: int
    height: int


@dataclass
class Frame:
    lines: list[str]
    status: StatusMessage
    status_hint: str
    cursor: Optional[tuple[int, int]]  # (x, y) on screen, None while a dialog is up
    dialog: Optional[DialogOverlay] = None
    scroll_row: int = 0
    scroll_col: int = 0


def visible_lines(session: EditorSession, height: int, width: int) -> list[str]:
    """Slice of the document inside the viewport, cut to the frame width."""
    viewport = session.viewport
    lines = session.document.lines[viewport.scroll_row:viewport.scroll_row + max(0, height)]
    return [line[viewport.scroll_col:viewport.scroll_col + width] for line in lines]


def status_for(session: EditorSession) -> StatusMessage:
    if session.status is not None:
        return session.status
    marker = EditorConstants.MODIFIED_MARKER if session.dirty else ""
    location = f"Ln {session.cursor.row + 1}, Col {session.cursor.col + 1}"
    return StatusMessage(f" {session.path}{marker}  {location}", StatusKind.INFO)


def layout_dialog(dialog: ConfirmExitDialog, height: int, width: int,
                  width_ratio: float = EditorConstants.DIALOG_WIDTH_RATIO,
                  height_ratio: float = EditorConstants.DIALOG_HEIGHT_RATIO) -> DialogOverlay:
    """Center a dialog box sized as a fraction of the frame.

    The box is never smaller than its content (when the frame allows it)
    and never larger than the frame.
    """
    actions = (dialog.yes_label, dialog.no_label)
    content_width = max(len(dialog.title), len(dialog.message), len("   ".join(actions))) + 4
    box_width = min(width, max(int(width * width_ratio), content_width))
    box_height = min(height, max(int(height * height_ratio), EditorConstants.DIALOG_MIN_HEIGHT))
    return DialogOverlay(
        title=dialog.title,
        message=dialog.message,
        actions=actions,
        top=max(0, (height - box_height) // 2),
        left=max(0, (width - box_width) // 2),
        width=box_width,
        height=box_height,
    )


def project_frame(session: EditorSession, height: int, width: int,
                  dialog_width_ratio: float = EditorConstants.DIALOG_WIDTH_RATIO,
                  dialog_height_ratio: float = EditorConstants.DIALOG_HEIGHT_RATIO) -> Frame:
    """Describe the next frame for a text area of height x width cells.

    Args:
        session: Session to draw
        height: Rows available for text (status line excluded)
        width: Columns available for text
        dialog_width_ratio: Fraction of the width used by a dialog
        dialog_height_ratio: Fraction of the height used by a dialog
    """
    viewport = session.viewport
    frame = Frame(
        lines=visible_lines(session, height, width),
        status=status_for(session),
        status_hint=EditorConstants.STATUS_HINT,
        cursor=None,
        scroll_row=viewport.scroll_row,
        scroll_col=viewport.scroll_col,
    )
    if session.dialog is not None:
        frame.dialog = layout_dialog(session.dialog, height, width,
                                     dialog_width_ratio, dialog_height_ratio)
    else:
        frame.cursor = (session.cursor.col - viewport.scroll_col,
                        session.cursor.row - viewport.scroll_row)
    return frame
