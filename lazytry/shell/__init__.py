"""Shell boundary: emitted scripts, git URIs, and the init snippet."""

from .git_uri import GitURI, clone_directory_name, is_git_uri, parse_git_uri
from .init_script import init_script, is_fish_shell
from .script import (
    SCRIPT_WARNING,
    emit_script,
    format_script,
    script_cd,
    script_clone,
    script_delete,
    shell_quote,
)

__all__ = [
    "GitURI",
    "SCRIPT_WARNING",
    "clone_directory_name",
    "emit_script",
    "format_script",
    "init_script",
    "is_fish_shell",
    "is_git_uri",
    "parse_git_uri",
    "script_cd",
    "script_clone",
    "script_delete",
    "shell_quote",
]
