"""Constants and configuration defaults for the levorg editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Document format
    LINE_TERMINATOR = "\n"
    FILE_ENCODING = "utf-8"

    # Status line
    STATUS_ROWS = 1  # Rows reserved at the bottom of the screen
    SAVED_MESSAGE = "Saved"
    MODIFIED_MARKER = " [Modified]"
    STATUS_HINT = "Ctrl-S save | Ctrl-Q quit"

    # Exit confirmation dialog
    CONFIRM_EXIT_TITLE = "Unsaved changes"
    CONFIRM_EXIT_MESSAGE = "Quit without saving your changes?"
    CONFIRM_YES_LABEL = "[Y]es"
    CONFIRM_NO_LABEL = "[N]o"
    CONFIRM_YES_KEYS = ("y", "Y")
    CONFIRM_NO_KEYS = ("n", "N")
    DIALOG_WIDTH_RATIO = 0.5  # Fraction of the frame width
    DIALOG_HEIGHT_RATIO = 0.3  # Fraction of the frame height
    DIALOG_MIN_HEIGHT = 6  # Two borders, message, actions and the spacing rows

    # File operations
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
    READ_ERROR_MESSAGE = "Error: Can't read file {}: {}"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Configuration and logging
    APP_NAME = "levorg"
    CONFIG_FILENAME = "config.json"
    LOG_FILENAME = "levorg.log"
    CONFIG_ENV_VAR = "LEVORG_CONFIG"
    LOG_LEVEL_ENV_VAR = "LEVORG_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
