"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select
import termios

from .view import DialogOverlay, Frame
from .session import StatusKind


class TerminalInitError(Exception):
    """The terminal could not be put into (or out of) editing mode."""


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._saved_tty_attrs: Optional[list] = None
        self._pending_keys: list[str] = []

    def setup(self):
        """Enter fullscreen mode and raw keyboard input.

        Raises:
            TerminalInitError: If stdin/stdout is not a terminal or raw
                input cannot be started
        """
        if not self.term.is_a_tty or not sys.stdin.isatty():
            raise TerminalInitError("levorg must be run in a terminal")
        try:
            from curtsies import Input  # type: ignore
            self._curtsies_input = Input(keynames='curtsies', sigint_event=False)
            self._curtsies_input.__enter__()  # type: ignore
        except Exception as e:
            self._curtsies_input = None
            raise TerminalInitError(f"Cannot start keyboard input: {e}") from e
        self._disable_flow_control()
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True

    def _disable_flow_control(self):
        """Let Ctrl-S and Ctrl-Q through to the editor instead of the tty."""
        try:
            self._saved_tty_attrs = termios.tcgetattr(sys.stdin)
            new_settings = list(self._saved_tty_attrs)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, AttributeError, OSError):
            # Editing still works; only Ctrl-S/Ctrl-Q may be eaten by the tty
            self._saved_tty_attrs = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._saved_tty_attrs is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSANOW, self._saved_tty_attrs)
            except (termios.error, OSError):
                pass
            self._saved_tty_attrs = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None

    def _status_style(self, kind: StatusKind) -> str:
        if kind == StatusKind.SUCCESS:
            return self.term.black_on_green
        if kind == StatusKind.ERROR:
            return self.term.white_on_red
        return self.term.reverse

    def draw_frame(self, frame: Frame):
        """Draw a frame: text lines, status line, dialog and cursor."""
        width = self.width
        print(self.term.home + self.term.clear, end='')

        for y, line in enumerate(frame.lines):
            print(self.term.move(y, 0) + line[:width], end='')

        self._draw_status(frame, width)

        if frame.dialog is not None:
            self._draw_dialog(frame.dialog)
            print(self.term.hide_cursor, end='', flush=True)
        elif frame.cursor is not None:
            x, y = frame.cursor
            # Without horizontal scrolling the column can lie past the edge
            x = min(x, max(0, width - 1))
            print(self.term.move(y, x) + self.term.normal_cursor, end='', flush=True)

    def _draw_status(self, frame: Frame, width: int):
        status_y = self.height
        text = frame.status.text
        if frame.status.kind == StatusKind.INFO and len(text) + len(frame.status_hint) + 2 <= width:
            text = text + frame.status_hint.rjust(width - len(text) - 1) + " "
        style = self._status_style(frame.status.kind)
        print(self.term.move(status_y, 0) + style + text[:width].ljust(width) + self.term.normal, end='')

    def _draw_dialog(self, dialog: DialogOverlay):
        """Draw a dialog box over the text."""
        inner = max(0, dialog.width - 2)
        bottom = dialog.top + dialog.height - 1
        title = f" {dialog.title} "[:inner]
        print(self.term.move(dialog.top, dialog.left)
              + "╔" + self.term.bold + title.center(inner, "═") + self.term.normal + "╗", end='')
        for y in range(dialog.top + 1, bottom):
            print(self.term.move(y, dialog.left) + "║" + " " * inner + "║", end='')
        print(self.term.move(bottom, dialog.left) + "╚" + "═" * inner + "╝", end='')

        message_y = min(dialog.top + 2, bottom - 1)
        actions_y = max(message_y, bottom - 1)
        print(self.term.move(message_y, dialog.left + 1) + dialog.message[:inner].center(inner), end='')
        actions = "   ".join(dialog.actions)[:inner].center(inner)
        print(self.term.move(actions_y, dialog.left + 1) + self.term.bold + actions + self.term.normal, end='')

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        evt = next(self._curtsies_input)  # type: ignore
        if evt is None:
            return None
        # A paste arrives as one event carrying the individual keys
        pasted = getattr(evt, "events", None)
        if pasted is not None:
            self._pending_keys.extend(str(e) for e in pasted)
            return self._pending_keys.pop(0) if self._pending_keys else None
        return str(evt)

    @property
    def has_pending_keys(self) -> bool:
        """True when keys from a paste are waiting to be read."""
        return bool(self._pending_keys)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return max(1, self.term.height - 1)  # Reserve one line for status
