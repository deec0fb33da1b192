"""System clipboard access through the platform's copy tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

from ansi_chart.errors import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used.
COPY_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)

COPY_TIMEOUT = 2.0


def find_copy_command() -> Optional[tuple[str, ...]]:
    """Return the first available copy command, or None."""
    for command in COPY_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def write_text(text: str) -> None:
    """
    Put ``text`` on the system clipboard.

    Raises:
        ClipboardError: If no copy tool is installed or the tool fails.
    """
    command = find_copy_command()
    if command is None:
        raise ClipboardError("no clipboard tool found")

    logger.debug("Copying %r with %s", text, command[0])
    try:
        subprocess.run(
            list(command),
            input=text,
            text=True,
            check=True,
            timeout=COPY_TIMEOUT,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as e:
        raise ClipboardError(f"{command[0]} timed out") from e
    except (subprocess.CalledProcessError, OSError) as e:
        raise ClipboardError(f"{command[0]} failed") from e
