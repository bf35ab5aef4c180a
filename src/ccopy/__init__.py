"""ccopy - keep only the commands from copied console text."""

from .extractor import CONTINUATION_PROMPT, PRIMARY_PROMPT, extract_commands, is_command_line
from .pipeline import copy_commands, print_commands, process_clipboard, run_commands

__version__ = "0.1.0"

__all__ = [
    "CONTINUATION_PROMPT",
    "PRIMARY_PROMPT",
    "copy_commands",
    "extract_commands",
    "is_command_line",
    "print_commands",
    "process_clipboard",
    "run_commands",
]
