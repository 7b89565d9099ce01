"""Path Resolver — pulls the username out of a request path.

Invariants:
    - /users and /api/users carry no username
    - /users/<name> and /api/users/<name> carry <name>
    - Any other segment count carries no username (never "the last segment anyway")
"""

from userapp.core.domain_types import Username
from userapp.core.errors import MissingIdentifierError

API_SEGMENT = "api"


def split_path(path: str) -> list[str]:
    """Split a URL path into segments, dropping the leading slash."""
    return path[1:].split("/") if path.startswith("/") else path.split("/")


def path_has_username(segments: list[str]) -> bool:
    if segments[0] == API_SEGMENT:
        return len(segments) == 3
    return len(segments) == 2


def resolve_username(path: str) -> Username:
    """Return the username in path, or "" when the path has none."""
    segments = split_path(path)
    if not path_has_username(segments):
        return Username("")
    return Username(segments[-1])


def require_username(path: str) -> Username:
    """Like resolve_username but raises MissingIdentifierError instead of ""."""
    segments = split_path(path)
    if not path_has_username(segments):
        raise MissingIdentifierError()
    return Username(segments[-1])
