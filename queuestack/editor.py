"""Open files in the user's preferred editor."""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path

from .config import Config


class EditorError(RuntimeError):
    """Raised when the editor command is invalid, cannot start or fails."""


def open_in_editor(path: str | Path, config: Config) -> None:
    """Open ``path`` in the configured editor (falling back to ``vi``).

    Nothing happens when standard output is not a terminal.
    """
    if not sys.stdout.isatty():
        return

    editor = config.editor()
    if editor is None:
        editor = "vi"

    try:
        parts = shlex.split(editor)
    except ValueError as exc:
        raise EditorError(f"Invalid editor command syntax: {exc}") from exc
    if not parts:
        raise EditorError("Empty editor command")

    try:
        result = subprocess.run([*parts, str(path)], check=False)
    except OSError as exc:
        raise EditorError(f"Failed to launch editor: {editor}: {exc}") from exc

    if result.returncode != 0:
        raise EditorError(f"Editor exited with error: exit status {result.returncode}")