"""Shell function definitions printed by ``try init``."""

from __future__ import annotations

import os

from .script import shell_quote

_POSIX_TEMPLATE = """try() {{
  local out
  out=$({exe} exec{path_arg} "$@" 2>/dev/tty)
  if [ $? -eq 0 ]; then
    eval "$out"
  else
    echo "$out"
  fi
}}
"""

_FISH_TEMPLATE = """function try
  set -l out ({exe} exec{path_arg} $argv 2>/dev/tty | string collect)
  if test $pipestatus[1] -eq 0
    eval $out
  else
    echo $out
  end
end
"""


def is_fish_shell(shell: str | None = None) -> bool:
    if shell is None:
        shell = os.environ.get("SHELL", "")
    return "fish" in shell


def init_script(exe_path: str, tries_path: str = "", shell: str | None = None) -> str:
    """Return the ``try`` wrapper for the user's shell.

    The wrapper evaluates stdout only when the tool exits successfully, so a
    cancellation notice is echoed instead of executed.
    """
    path_arg = f" --path {shell_quote(tries_path)}" if tries_path else ""
    template = _FISH_TEMPLATE if is_fish_shell(shell) else _POSIX_TEMPLATE
    return template.format(exe=shell_quote(exe_path), path_arg=path_arg)
