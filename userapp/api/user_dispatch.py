"""User Dispatch — explicit routing from HTTP method to CRUD handler.

Invariants:
    - Every method -> handler mapping is visible in one dict
    - GET without a username lists; GET with one reads
    - PUT and DELETE require a username in the path; POST ignores it
    - PUT rejects a body whose user-name differs from the path username
    - Unknown methods raise UnsupportedMethodError
    - Storage is reached only through UserService

Design Decisions:
    - Handlers raise UserAppError subclasses; api/error_handlers.py turns them
      into the HTTP response, so no handler writes an error body itself
    - Stateless per request: a dispatcher holds only its collaborators
"""

import logging

from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from userapp.api.renderer import Renderer
from userapp.core.domain_types import Confirmation, HttpMethod, UserView
from userapp.core.errors import (
    ErrorContext, IdentifierMismatchError, MalformedBodyError, UnsupportedMethodError,
)
from userapp.core.path_resolver import require_username, resolve_username
from userapp.schemas.user import UserRecord
from userapp.services.user_service import UserService

logger = logging.getLogger(__name__)


class UserDispatch:
    """Routes (method, path) -> list/read/create/update/delete."""

    def __init__(self, service: UserService, renderer: Renderer):
        self._service = service
        self._renderer = renderer
        self._handlers = {
            HttpMethod.GET.value: self._get,
            HttpMethod.POST.value: self._create,
            HttpMethod.PUT.value: self._update,
            HttpMethod.DELETE.value: self._delete,
        }

    async def dispatch(
        self, method: str, path: str, content_type: str | None, body: bytes,
    ) -> Response:
        handler = self._handlers.get(method.upper())
        if not handler:
            raise UnsupportedMethodError(method)
        logger.debug(
            f"Dispatching {method} {path}",
            extra={"method": method, "path": path},
        )
        return await handler(path, content_type, body)

    async def _get(self, path: str, content_type: str | None, body: bytes) -> Response:
        username = resolve_username(path)
        if not username:
            users = await self._service.list_users()
            return self._renderer.render(content_type, users, UserView.LIST.value)
        user = await self._service.find_user(username)
        return self._renderer.render(content_type, user, UserView.SHOW.value)

    async def _create(self, path: str, content_type: str | None, body: bytes) -> Response:
        user = _decode_user(body)
        await self._service.add_user(user)
        return PlainTextResponse(Confirmation.ADDED.value)

    async def _update(self, path: str, content_type: str | None, body: bytes) -> Response:
        username = require_username(path)
        user = _decode_user(body)
        if username != user.username:
            raise IdentifierMismatchError(
                username, user.username, ErrorContext(username=username),
            )
        await self._service.update_user(user)
        return PlainTextResponse(Confirmation.UPDATED.value)

    async def _delete(self, path: str, content_type: str | None, body: bytes) -> Response:
        username = require_username(path)
        await self._service.remove_user(username)
        return PlainTextResponse(Confirmation.DELETED.value)


def _decode_user(body: bytes) -> UserRecord:
    """Decode a JSON request body into a UserRecord."""
    try:
        return UserRecord.model_validate_json(body)
    except ValidationError as e:
        raise MalformedBodyError(_first_error(e))


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]
