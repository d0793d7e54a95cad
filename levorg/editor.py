"""Main editor controller."""

import logging
import os
import select
import signal
from typing import Optional

from .commands import InputController
from .config import EditorConfig
from .constants import EditorConstants
from .cursor import reconcile_viewport
from .keyboard import KeyboardHandler, KeyEvent
from .session import EditorSession
from .terminal import TerminalInterface
from .view import Frame, project_frame

logger = logging.getLogger(__name__)


class Editor:
    """Main editor application controller."""

    def __init__(self, path: str, config: Optional[EditorConfig] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components and open the file."""
        self.config = config or EditorConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.controller = InputController()
        self.session = EditorSession.open(path)
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until the user quits."""
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        # Ctrl-C must not skip the unsaved changes prompt
        original_int_handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
        logger.info(f"Editing {self.session.path}")

        try:
            self.terminal.setup()
            while self.session.running:
                self._draw()
                key_event = self._wait_for_key_event()
                if key_event:
                    self.handle_key_event(key_event)
        finally:
            # Restore original signal handlers
            signal.signal(signal.SIGWINCH, original_winch_handler)
            signal.signal(signal.SIGINT, original_int_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def _wait_for_key_event(self) -> Optional[KeyEvent]:
        """Block until a key arrives or the terminal is resized.

        Returns:
            The key event, or None when woken up by a resize
        """
        if self.terminal.has_pending_keys:
            return self.keyboard.get_key_event(timeout=0)

        # Use file descriptor 0 for stdin to work in all environments
        ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
        if self._resize_pipe_r in ready:
            os.read(self._resize_pipe_r, 1024)
            return None
        if 0 in ready:
            return self.keyboard.get_key_event(timeout=0)
        return None

    def handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        self.controller.handle_key_event(self.session, key_event)

    def render(self) -> Frame:
        """Scroll to keep the cursor visible and project the next frame."""
        height = self.terminal.height
        width = self.terminal.width
        reconcile_viewport(
            self.session.viewport,
            self.session.cursor,
            height,
            width if self.config.horizontal_scroll else None,
        )
        return project_frame(
            self.session,
            height,
            width,
            dialog_width_ratio=self.config.dialog_width_ratio,
            dialog_height_ratio=self.config.dialog_height_ratio,
        )

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.terminal.draw_frame(self.render())
