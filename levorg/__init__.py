"""levorg - a small terminal text editor."""

from .document import Document
from .cursor import CursorPosition, Viewport, reconcile_viewport
from .session import EditorSession, Mode, StatusKind
from .view import Frame, project_frame

__all__ = [
    'Document',
    'CursorPosition',
    'Viewport',
    'reconcile_viewport',
    'EditorSession',
    'Mode',
    'StatusKind',
    'Frame',
    'project_frame',
]
