"""Shell script fragments emitted on stdout for the wrapping shell function.

The tool never changes directory or deletes anything itself; it prints
commands that the ``try`` shell function evaluates.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

SCRIPT_WARNING = "# if you can read this, you didn't launch try from an alias. run try --help."


def shell_quote(value: str | Path) -> str:
    """Single-quote ``value`` for POSIX shells and fish."""
    return "'" + str(value).replace("'", "'\"'\"'") + "'"


def script_cd(path: Path) -> list[str]:
    """Touch ``path`` (bumping its mtime), announce it, and change into it."""
    quoted = shell_quote(path)
    return [f"touch {quoted}", f"echo {quoted}", f"cd {quoted}"]


def script_clone(path: Path, uri: str) -> list[str]:
    message = f"Using git clone to create this trial from {uri}."
    return [
        f"mkdir -p {shell_quote(path)}",
        f"echo {shell_quote(message)}",
        f"git clone {shell_quote(uri)} {shell_quote(path)}",
        *script_cd(path),
    ]


def script_delete(path: Path, base_path: Path) -> list[str]:
    """Remove ``path`` from inside ``base_path`` and return to a live directory.

    The shell hops back to the previous working directory, or to the tries
    root when the previous one was the deleted try.
    """
    quoted_base = shell_quote(base_path)
    quoted_name = shell_quote(path.name)
    return [
        "old_pwd=$PWD",
        f"cd {quoted_base}",
        f"test -d {quoted_name} && rm -rf {quoted_name}",
        f'cd "$old_pwd" 2>/dev/null || cd {quoted_base}',
    ]


def format_script(cmds: list[str]) -> str:
    """Join commands into one ``&&`` chain with line continuations."""
    lines = [SCRIPT_WARNING]
    for idx, cmd in enumerate(cmds):
        line = cmd if idx == 0 else f"  {cmd}"
        if idx < len(cmds) - 1:
            line += " && \\"
        lines.append(line)
    return "\n".join(lines) + "\n"


def emit_script(cmds: list[str], stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(format_script(cmds))
    out.flush()
