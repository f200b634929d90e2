"""Command-line front door for lazytry.

Parses options, resolves the tries root and theme, and dispatches to the
selector, clone, or init commands. Anything meant for the shell goes to
stdout; messages and the interactive UI go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from . import __version__
from .catalog import CatalogError
from .render.help import help_text
from .runtime import run_selector
from .runtime.config import expand_path, load_theme_name, resolve_tries_path, save_theme_name
from .shell import (
    clone_directory_name,
    emit_script,
    init_script,
    is_git_uri,
    script_cd,
    script_clone,
    script_delete,
)
from .ui_theme import UITheme, available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)

PROG = "try"
DEBUG_ENV = "LAZYTRY_DEBUG"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: script lines to emit, or a cancellation."""

    cmds: list[str] = field(default_factory=list)
    cancelled: bool = False


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout is reserved for shell commands."""
    debug = verbose or os.environ.get(DEBUG_ENV, "") not in {"", "0"}
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)


def extract_option(args: list[str], option: str) -> tuple[list[str], str]:
    """Remove the last ``option VALUE`` / ``option=VALUE`` from ``args``.

    The option may appear anywhere, including after query words, because the
    shell wrapper places it after ``exec``.
    """
    idx = -1
    for i, arg in enumerate(args):
        if arg == option or arg.startswith(option + "="):
            idx = i
    if idx == -1:
        return args, ""
    args = list(args)
    arg = args.pop(idx)
    if "=" in arg:
        return args, arg.split("=", 1)[1]
    if idx >= len(args):
        return args, ""
    return args, args.pop(idx)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Jump between dated scratch directories, creating new ones on demand.",
        add_help=False,
    )
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable colors in the selector.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("args", nargs="*")
    return parser


def cmd_clone(args: list[str], tries_path: Path) -> CommandResult:
    """Build a clone script for ``URI [NAME...]``."""
    if not args or not args[0].strip():
        raise ValueError("git URI required for clone command")
    uri = args[0]
    dir_name = clone_directory_name(uri, " ".join(args[1:]))
    return CommandResult(script_clone(tries_path / dir_name, uri))


def cmd_cd(words: list[str], tries_path: Path, theme: UITheme, selector=run_selector) -> CommandResult:
    """Run the selector seeded with ``words``; a leading git URI clones instead."""
    search_term = " ".join(words)
    parts = search_term.split()
    if parts and is_git_uri(parts[0]):
        return cmd_clone(parts, tries_path)

    result = selector(tries_path, search_term, theme)
    if result.deleted is not None:
        return CommandResult(script_delete(result.deleted, tries_path))
    if result.selected is not None:
        return CommandResult(script_cd(result.selected))
    return CommandResult(cancelled=True)


def _finish(result: CommandResult, stdout: TextIO) -> int:
    if result.cancelled:
        stdout.write("Cancelled.\n")
        return 1
    emit_script(result.cmds, stdout)
    return 0


def run(argv: list[str], stdout: TextIO, stderr: TextIO, selector=run_selector) -> int:
    """Execute one invocation and return the process exit code."""
    for arg in argv:
        if arg in {"--help", "-h"}:
            stderr.write(help_text(PROG, __version__))
            return 0
        if arg in {"--version", "-v"}:
            stderr.write(f"{PROG} {__version__}\n")
            return 0

    argv, path_option = extract_option(argv, "--path")
    # Options may follow the command: the shell wrapper always emits `exec ... "$@"`.
    args = build_parser().parse_intermixed_args(argv)
    configure_logging(args.verbose)

    tries_path = resolve_tries_path(path_option or None)
    if args.theme and normalize_theme_name(args.theme) == args.theme.strip().lower():
        save_theme_name(args.theme.strip().lower())
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    logger.debug("tries path: %s", tries_path)

    if args.command is None:
        stderr.write(help_text(PROG, __version__))
        return 2

    command = args.command
    rest = list(args.args)
    try:
        if command == "init":
            if rest and rest[0].startswith("/"):
                tries_path = expand_path(rest[0])
            exe = os.path.abspath(sys.argv[0])
            stdout.write(init_script(exe, str(tries_path)))
            return 0
        if command == "clone":
            return _finish(cmd_clone(rest, tries_path), stdout)
        if command == "exec":
            target = rest[0] if rest else "cd"
            if target == "clone":
                return _finish(cmd_clone(rest[1:], tries_path), stdout)
            if target == "cd":
                rest = rest[1:]
            return _finish(cmd_cd(rest, tries_path, theme, selector), stdout)
        if command == "cd":
            return _finish(cmd_cd(rest, tries_path, theme, selector), stdout)
        return _finish(cmd_cd([command, *rest], tries_path, theme, selector), stdout)
    except (CatalogError, ValueError, OSError) as exc:
        stderr.write(f"Error: {exc}\n")
        return 1


def main() -> None:
    """Console-script entry point."""
    raise SystemExit(run(sys.argv[1:], sys.stdout, sys.stderr))


if __name__ == "__main__":
    main()
