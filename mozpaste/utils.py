#!/usr/bin/env python3
"""
Utility functions for moz-paste.
"""

import sys
import shutil
import wcwidth
from typing import List, Union


BLUE = "\033[94m"
END = "\033[0m"


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string with appropriate unit (B, KB, MB, GB)
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def colorize_link(url: str, stream=None) -> str:
    """Wrap a URL in blue when the target stream is a terminal."""
    stream = stream or sys.stdout
    if hasattr(stream, "isatty") and stream.isatty():
        return f"{BLUE}{url}{END}"
    return url


def print_info(message: str, prefix: str = "") -> None:
    """Print an informational message, optionally prefixed (e.g. 'ERROR')."""
    if prefix:
        message = f"{prefix}: {message}"
    print(message)


def print_success(message: str) -> None:
    print(message)


def get_visual_width(text) -> int:
    """
    Calculate the visual width of text, considering emojis and other wide characters.

    Args:
        text: The string to calculate visual width for

    Returns:
        int: The visual width of the text
    """
    return wcwidth.wcswidth(str(text))


def pad_string(text, width) -> str:
    """
    Left-align a string to the given visual width, taking into account wide characters like emojis.

    Args:
        text: The string to pad
        width: The desired visual width

    Returns:
        str: The padded string
    """
    text_str = str(text)
    padding_needed = max(0, width - get_visual_width(text_str))
    return text_str + " " * padding_needed


def print_multi_column_list(items: List[str], term_width: int = -1) -> None:
    """
    Print a list of strings in column-major order, as many columns as fit.

    Args:
        items: Strings to display
        term_width: Terminal width (auto-detected if -1)
    """
    if not items:
        print("No items to display.")
        return

    try:
        if term_width == -1:
            term_width = shutil.get_terminal_size().columns
    except (AttributeError, OSError):
        term_width = 90

    max_width = max(get_visual_width(item) for item in items) + 4
    num_cols = max(1, term_width // max_width)
    num_rows = (len(items) + num_cols - 1) // num_cols

    for row in range(num_rows):
        row_cells = []
        for col in range(num_cols):
            idx = col * num_rows + row
            if idx < len(items):
                row_cells.append(pad_string(items[idx], max_width))
        print("".join(row_cells).rstrip())
