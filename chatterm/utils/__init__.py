from .ansi import (
    Ansi,
    USER_LABEL,
    ASSISTANT_LABEL,
    ERROR_LABEL,
    console,
    err_console,
    print_verbatim,
)
from .clipboard import copy_to_clipboard
from .screen import clear_screen
from .spinner import Spinner

__all__ = [
    "Ansi",
    "USER_LABEL",
    "ASSISTANT_LABEL",
    "ERROR_LABEL",
    "console",
    "err_console",
    "print_verbatim",
    "copy_to_clipboard",
    "clear_screen",
    "Spinner",
]
