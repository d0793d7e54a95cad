"""levorg CLI entry point.

Allows running via `python -m levorg` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .version import get_version_string

logger = logging.getLogger(__name__)

USAGE = "usage: levorg [--version | --keytest] [PATH]"


def resolve_path(arg: Optional[str]) -> str:
    """Absolute, canonical form of the path argument (default: current directory).

    Falls back to the path as given if it cannot be resolved.
    """
    path = arg or "."
    try:
        return os.path.realpath(path, strict=True)
    except (OSError, ValueError):
        return path


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    # Represent control/escape characters visibly
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print how each key press is decoded. Quit with ESC."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyEvent, KeyType

    print("Keyboard test mode: press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev: KeyEvent | None = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            flags = [name for name, on in (('alt', ev.is_alt), ('ctrl', ev.is_ctrl),
                                           ('shift', ev.is_shift), ('seq', ev.is_sequence)) if on]
            if flags:
                parts.append(f"flags={'+'.join(flags)}")
            print(' '.join(parts) + '\r')
    finally:
        term.cleanup()


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, key test mode and an optional path
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        return 0
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --version
    from .config import load_config
    from .editor import Editor
    from .log import configure_logging
    from .terminal import TerminalInitError

    config = load_config()
    configure_logging(config)

    try:
        if args and args[0] in ('--keytest', '--keyboard-test'):
            run_keyboard_test()
            return 0
        editor = Editor(resolve_path(args[0] if args else None), config=config)
        editor.run()
    except TerminalInitError as e:
        logger.error(f"Terminal error: {e}")
        print(f"levorg: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
