"""User Dispatch — method/path decision table against an in-memory repository.

Tests cover:
    - GET lists or reads depending on the path shape
    - POST/PUT/DELETE call the matching service operation and nothing else
    - Mismatch, missing identifier, bad body and unknown verbs raise before storage
"""

import json

import pytest

from userapp.api.renderer import Renderer
from userapp.api.user_dispatch import UserDispatch
from userapp.core.errors import (
    IdentifierMismatchError, MalformedBodyError, MissingIdentifierError,
    UnsupportedMethodError,
)
from userapp.schemas.user import UserRecord

JSON = "application/json"


@pytest.fixture
def dispatcher(service, tmp_path):
    return UserDispatch(service, Renderer(tmp_path))


async def test_get_collection_lists(dispatcher, fake_repository):
    res = await dispatcher.dispatch("GET", "/users", JSON, b"")

    assert json.loads(res.body)[0]["user-name"] == "test"
    assert fake_repository.calls == [("list_all", None)]


async def test_get_item_reads(dispatcher, fake_repository):
    await dispatcher.dispatch("GET", "/api/users/test", JSON, b"")

    assert fake_repository.calls == [("find", "test")]


async def test_post_creates(dispatcher, fake_repository):
    res = await dispatcher.dispatch("POST", "/users", JSON, b'{"user-name":"new"}')

    assert res.body == b"user successfully added"
    assert fake_repository.calls == [("add", UserRecord(username="new"))]


async def test_put_updates(dispatcher, fake_repository):
    body = b'{"user-name":"test","email":"e@x"}'

    res = await dispatcher.dispatch("PUT", "/users/test", JSON, body)

    assert res.body == b"user successfully updated"
    assert fake_repository.calls == [
        ("update", UserRecord(username="test", email="e@x")),
    ]


async def test_delete_removes(dispatcher, fake_repository):
    res = await dispatcher.dispatch("DELETE", "/users/test", None, b"")

    assert res.body == b"user successfully deleted"
    assert fake_repository.calls == [("remove", "test")]


async def test_put_with_mismatched_body_never_reaches_storage(dispatcher, fake_repository):
    with pytest.raises(IdentifierMismatchError):
        await dispatcher.dispatch("PUT", "/users/test", JSON, b'{"user-name":"x"}')

    assert fake_repository.calls == []


async def test_put_without_path_username_raises(dispatcher, fake_repository):
    with pytest.raises(MissingIdentifierError):
        await dispatcher.dispatch("PUT", "/api/users", JSON, b'{"user-name":"test"}')

    assert fake_repository.calls == []


async def test_delete_with_extra_segments_raises(dispatcher):
    with pytest.raises(MissingIdentifierError):
        await dispatcher.dispatch("DELETE", "/api/users/a/b", JSON, b"")


async def test_post_with_empty_body_raises(dispatcher, fake_repository):
    with pytest.raises(MalformedBodyError):
        await dispatcher.dispatch("POST", "/users", JSON, b"")

    assert fake_repository.calls == []


async def test_unknown_method_raises(dispatcher, fake_repository):
    with pytest.raises(UnsupportedMethodError):
        await dispatcher.dispatch("OPTIONS", "/users", JSON, b"")

    assert fake_repository.calls == []


@pytest.mark.parametrize("method", ["HEAD", "TRACE", "CONNECT"])
async def test_every_non_crud_verb_raises(dispatcher, fake_repository, method):
    with pytest.raises(UnsupportedMethodError) as exc_info:
        await dispatcher.dispatch(method, "/users/test", JSON, b"")

    assert exc_info.value.message == f"unsupported method: {method}"
    assert fake_repository.calls == []
