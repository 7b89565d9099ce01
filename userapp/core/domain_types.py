"""Domain Types — names for the primitives the user service passes around.

Invariants:
    - Username wraps str; the empty Username means "no identifier" / "not found"
    - Every rendered view is named by a UserView member, never a raw string
"""

from enum import Enum
from typing import NewType


Username = NewType("Username", str)

JSON_CONTENT_TYPE = "application/json"


class UserView(str, Enum):
    """HTML templates, one per read operation."""
    LIST = "list.html"
    SHOW = "show.html"


class HttpMethod(str, Enum):
    """Verbs the dispatcher knows how to route."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Confirmation(str, Enum):
    """Plain-text bodies returned by successful mutations."""
    ADDED = "user successfully added"
    UPDATED = "user successfully updated"
    DELETED = "user successfully deleted"
