"""Git URI recognition and clone-directory naming."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..selector.naming import sanitize_name

HTTPS_GIT_URI_RE = re.compile(r"^https?://([^/]+)/([^/]+)/([^/]+)$")
SSH_GIT_URI_RE = re.compile(r"^git@([^:]+):([^/]+)/([^/]+)$")
KNOWN_GIT_HOSTS = ("github.com", "gitlab.com")


@dataclass(frozen=True)
class GitURI:
    host: str
    user: str
    repo: str


def parse_git_uri(uri: str) -> GitURI | None:
    """Split an https or scp-style git URI into host, user, and repo."""
    trimmed = uri.strip()
    if trimmed.endswith(".git"):
        trimmed = trimmed[: -len(".git")]
    if not trimmed:
        return None
    for pattern in (HTTPS_GIT_URI_RE, SSH_GIT_URI_RE):
        match = pattern.match(trimmed)
        if match:
            return GitURI(host=match.group(1), user=match.group(2), repo=match.group(3))
    return None


def is_git_uri(arg: str) -> bool:
    """Loose check used to route ``try <uri>`` into a clone."""
    arg = arg.strip()
    if not arg:
        return False
    if arg.startswith(("http://", "https://", "git@")):
        return True
    return any(host in arg for host in KNOWN_GIT_HOSTS) or arg.endswith(".git")


def clone_directory_name(uri: str, custom_name: str = "", today: date | None = None) -> str:
    """Directory name for a clone: the custom name, else ``<date>-<user>-<repo>``.

    Raises ``ValueError`` when no custom name is given and ``uri`` cannot be parsed.
    """
    if custom_name.strip():
        return sanitize_name(custom_name)
    parsed = parse_git_uri(uri)
    if parsed is None:
        raise ValueError(f"unable to parse git URI: {uri}")
    if today is None:
        today = date.today()
    return f"{today.isoformat()}-{parsed.user}-{parsed.repo}"
