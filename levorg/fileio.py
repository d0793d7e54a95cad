"""Whole-file text reads and atomic writes."""

import logging
import os
import tempfile

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def read_text(path: str) -> str:
    """Read a whole file as text.

    Raises:
        OSError: If the file cannot be read or is not valid text
    """
    try:
        with open(path, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise OSError(f"not valid {EditorConstants.FILE_ENCODING} text ({e.reason})") from e


def write_text(path: str, text: str) -> None:
    """Write text to a file atomically.

    The text goes to a temporary file in the same directory which then
    replaces the target, so a failed write leaves the original intact.

    Raises:
        OSError: If the file cannot be written
    """
    dir_name = os.path.dirname(path) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                         dir=dir_name, suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         newline='', delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        # Keep the permissions of the file being replaced
        try:
            os.chmod(temp_filename, os.stat(path).st_mode & 0o7777)
        except FileNotFoundError:
            pass
        os.replace(temp_filename, path)
    except OSError:
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_filename}: {cleanup_error}")
        raise
