"""Editing session state.

One EditorSession holds everything a running editor knows: the file path,
the document, cursor, viewport, the active dialog and the status message.
It is passed explicitly to the input handlers and the frame projection.
"""

import errno
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from . import fileio
from .constants import EditorConstants
from .cursor import CursorPosition, Viewport
from .document import Document

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Input modes of the editor."""
    EDITING = "editing"
    CONFIRMING_EXIT = "confirming_exit"


class StatusKind(Enum):
    """Color category of a status message."""
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class StatusMessage:
    text: str
    kind: StatusKind = StatusKind.INFO


@dataclass
class ConfirmExitDialog:
    """Modal prompt shown when quitting with unsaved changes."""
    title: str = EditorConstants.CONFIRM_EXIT_TITLE
    message: str = EditorConstants.CONFIRM_EXIT_MESSAGE
    yes_label: str = EditorConstants.CONFIRM_YES_LABEL
    no_label: str = EditorConstants.CONFIRM_NO_LABEL


class EditorSession:
    """Mutable state of one editing session."""

    def __init__(self, path: str, document: Optional[Document] = None):
        self.path = path
        self.document = document or Document()
        self.cursor = CursorPosition()
        self.viewport = Viewport()
        self.dialog: Optional[ConfirmExitDialog] = None
        self.status: Optional[StatusMessage] = None
        self.running = True

    @classmethod
    def open(cls, path: str, reader: Callable[[str], str] = fileio.read_text) -> "EditorSession":
        """Open a session on a file.

        An unreadable file does not abort: the session starts with the
        error message as the only line of the buffer.
        """
        try:
            text = reader(path)
            logger.info(f"Loaded {path}")
        except OSError as e:
            reason = e.strerror or str(e)
            logger.warning(f"Could not read {path}: {reason}")
            text = EditorConstants.READ_ERROR_MESSAGE.format(path, reason)
        return cls(path, Document.load(text))

    @property
    def mode(self) -> Mode:
        if self.dialog is not None:
            return Mode.CONFIRMING_EXIT
        return Mode.EDITING

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    def set_status(self, text: str, kind: StatusKind = StatusKind.INFO) -> None:
        self.status = StatusMessage(text, kind)

    def save(self, writer: Callable[[str, str], None] = fileio.write_text) -> bool:
        """Write the document to its path.

        Failures are reported through the status message and leave the
        dirty flag set.

        Returns:
            True if the save succeeded
        """
        try:
            writer(self.path, self.document.serialize())
        except PermissionError:
            self._save_failed(f"Error: Permission denied saving {self.path}")
            return False
        except OSError as e:
            if e.errno == errno.ENOSPC:
                self._save_failed("Error: No space left on device")
            else:
                reason = e.strerror or str(e)
                self._save_failed(f"Error: Cannot save to {self.path}: {reason}")
            return False
        self.document.mark_saved()
        self.set_status(EditorConstants.SAVED_MESSAGE, StatusKind.SUCCESS)
        logger.info(f"Saved {self.path}")
        return True

    def _save_failed(self, message: str) -> None:
        logger.warning(message)
        self.set_status(message, StatusKind.ERROR)

    def request_quit(self) -> None:
        """Quit, or ask for confirmation first when there are unsaved changes."""
        if self.dirty:
            self.dialog = ConfirmExitDialog()
        else:
            self.running = False

    def confirm_quit(self) -> None:
        logger.info(f"Quitting with unsaved changes to {self.path} discarded")
        self.dialog = None
        self.running = False

    def cancel_quit(self) -> None:
        self.dialog = None
