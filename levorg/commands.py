"""Command pattern implementation for editor actions.

The InputController is the editor's input state machine: it routes each
key event to the handler of the session's current mode. In editing mode
the CommandRegistry maps keys to commands; the exit confirmation dialog
swallows everything except its yes/no keys.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple, Optional

from .constants import EditorConstants
from .keyboard import KeyEvent, KeyType
from .session import EditorSession, Mode

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, session: EditorSession, key_event: KeyEvent) -> bool:
        """Execute the command.

        Args:
            session: Session to act on
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, session, key_event):
        self._move(session)
        return False

    @abstractmethod
    def _move(self, session: EditorSession):
        """Perform the movement."""


class LeftCharCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_left(session.document)


class RightCharCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_right(session.document)


class UpLineCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_up(session.document)


class DownLineCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_down(session.document)


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, session, key_event):
        changed = self._edit(session, key_event)
        if changed:
            # A stale "Saved" must not hide the modified marker
            session.status = None
        return changed

    @abstractmethod
    def _edit(self, session: EditorSession, key_event: KeyEvent) -> bool:
        """Perform the edit and report whether the text changed."""


class InsertTextCommand(EditCommand):
    def _edit(self, session, key_event):
        char = key_event.value
        # Control characters and Ctrl/Alt combinations are never text
        if key_event.has_modifier or len(char) != 1 or ord(char) < 32 or char == '\x7f':
            return False
        cursor = session.cursor
        session.document.insert_char(cursor.row, cursor.col, char)
        cursor.col += 1
        return True


class BackspaceCommand(EditCommand):
    def _edit(self, session, key_event):
        cursor = session.cursor
        position = session.document.delete_backward(cursor.row, cursor.col)
        if position == (cursor.row, cursor.col):
            return False
        cursor.move_to(position)
        return True


class InsertNewlineCommand(EditCommand):
    def _edit(self, session, key_event):
        cursor = session.cursor
        cursor.move_to(session.document.split_line(cursor.row, cursor.col))
        return True


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, session, key_event):
        """System commands don't modify document content directly."""
        self._execute_system(session)
        return False

    @abstractmethod
    def _execute_system(self, session: EditorSession):
        """Perform the system action."""


class QuitCommand(SystemCommand):
    def _execute_system(self, session):
        session.request_quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, session):
        session.save()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, session: EditorSession, key_event: KeyEvent) -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(session, key_event)

        # Plain characters are inserted as text
        if key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand().execute(session, key_event)

        return False


class InputController:
    """Routes key events to the handler for the session's mode."""

    def __init__(self, registry: Optional[CommandRegistry] = None):
        self.registry = registry or CommandRegistry()
        self._handlers: Dict[Mode, Callable[[EditorSession, KeyEvent], None]] = {
            Mode.EDITING: self._handle_editing,
            Mode.CONFIRMING_EXIT: self._handle_confirm_exit,
        }

    def handle_key_event(self, session: EditorSession, key_event: KeyEvent) -> None:
        """Apply one key event to the session."""
        # Releases and auto-repeats are not acted upon
        if not key_event.is_press:
            return
        self._handlers[session.mode](session, key_event)

    def _handle_editing(self, session, key_event):
        if self.registry.execute(session, key_event):
            logger.debug(f"Edited {session.path} via {key_event.raw!r}")

    def _handle_confirm_exit(self, session, key_event):
        if key_event.key_type != KeyType.REGULAR:
            return
        if key_event.value in EditorConstants.CONFIRM_YES_KEYS:
            session.confirm_quit()
        elif key_event.value in EditorConstants.CONFIRM_NO_KEYS:
            session.cancel_quit()
