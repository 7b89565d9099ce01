"""User Routes — every /users path funnels into UserDispatch.

Invariants:
    - /users and /users/<anything> accept GET, POST, PUT, DELETE plus the verbs
      the dispatcher rejects (PATCH, OPTIONS, HEAD, TRACE, CONNECT), so every
      verb gets the same failure response; any other verb is caught by the
      405 handler in api/error_handlers.py
    - The route knows nothing about methods or usernames; UserDispatch decides
"""

from fastapi import APIRouter, Depends, Request

from userapp.api.dependencies import get_user_dispatch
from userapp.api.user_dispatch import UserDispatch

router = APIRouter(tags=["users"])

ACCEPTED_METHODS = [
    "GET", "POST", "PUT", "DELETE",
    "PATCH", "OPTIONS", "HEAD", "TRACE", "CONNECT",
]


@router.api_route("/users", methods=ACCEPTED_METHODS)
@router.api_route("/users/{rest:path}", methods=ACCEPTED_METHODS)
async def users(
    request: Request, dispatcher: UserDispatch = Depends(get_user_dispatch),
):
    """List, read, create, update or delete users depending on method and path."""
    body = await request.body()
    return await dispatcher.dispatch(
        request.method,
        request.url.path,
        request.headers.get("content-type"),
        body,
    )
