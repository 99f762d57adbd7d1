"""Terminal width detection."""

import os
import sys
from typing import Optional


def terminal_width() -> Optional[int]:
    """Width of the terminal attached to stdout, or None when there isn't one."""
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return None
    return columns or None
