"""Shared fixtures for actionweb tests."""

from collections.abc import Iterator

import pytest

from actionweb.web import context
from actionweb.web.http import AppContext, Request, Response


@pytest.fixture(autouse=True)
def _isolated_ambient_state() -> Iterator[None]:
    """Reset every ambient slot around each test.

    Factories register the current invocation even outside a request
    scope; without this, that state would carry over between tests on
    the same thread.
    """
    slots = (
        context._request_var,
        context._response_var,
        context._context_var,
        context._attributes_var,
        context._invocation_var,
    )
    tokens = [(var, var.set(None)) for var in slots]
    yield
    for var, token in reversed(tokens):
        var.reset(token)


@pytest.fixture
def http_request() -> Request:
    return Request.from_url("GET", "/users/show?user_id=42&tag=a&tag=b")


@pytest.fixture
def response() -> Response:
    return Response()


@pytest.fixture
def app_context() -> AppContext:
    return AppContext("test")
