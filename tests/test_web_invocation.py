"""Tests for actionweb.web.invocation — delegation to the wrapped invocation."""

from typing import Any

import pytest

from actionweb.actions.factory import ActionFactory
from actionweb.actions.invocation import ActionInvocation
from actionweb.actions.spec import ResultSpec, action
from actionweb.web.http import AppContext, Request, Response
from actionweb.web.invocation import WebActionInvocation
from actionweb.web.params import QueryParams, RequestParameters


class Actions:
    @action("/sum")
    def total(self, *values: Any) -> int:
        return sum(values)


@pytest.fixture
def bare() -> ActionInvocation:
    factory = ActionFactory()
    factory.add_actions(Actions)
    invocation = factory.create_action_invocation("/sum")
    assert isinstance(invocation, ActionInvocation)
    return invocation


@pytest.fixture
def wrapped(
    bare: ActionInvocation, http_request: Request, response: Response, app_context: AppContext
) -> WebActionInvocation:
    return WebActionInvocation(bare, http_request, response, app_context, {"shared": True})


class TestDelegation:
    def test_read_only_forwards(self, bare: ActionInvocation, wrapped: WebActionInvocation) -> None:
        assert wrapped.invocation is bare
        assert wrapped.action_factory is bare.action_factory
        assert wrapped.action_proxy is bare.action_proxy
        assert wrapped.executed is False

    def test_invoke_runs_wrapped(self, bare: ActionInvocation, wrapped: WebActionInvocation) -> None:
        assert wrapped.invoke(1, 2, 3) == 6
        assert bare.executed is True
        assert wrapped.executed is True
        assert wrapped.params == (1, 2, 3)
        assert wrapped.invoke_result == 6

    def test_setters_write_through(self, bare: ActionInvocation, wrapped: WebActionInvocation) -> None:
        wrapped.invoke_result = "r"
        wrapped.result = ResultSpec("ok")
        wrapped.convert_params = ("c",)
        assert bare.invoke_result == "r"
        assert bare.result == ResultSpec("ok")
        assert bare.convert_params == ("c",)

    def test_converter_write_through(self, bare: ActionInvocation, wrapped: WebActionInvocation) -> None:
        converter = bare.parameter_converter
        wrapped.parameter_converter = None
        assert bare.parameter_converter is None
        wrapped.parameter_converter = converter
        assert wrapped.parameter_converter is converter


class TestRequestScope:
    def test_triple_identity(
        self, wrapped: WebActionInvocation, http_request: Request, response: Response, app_context: AppContext
    ) -> None:
        assert wrapped.request is http_request
        assert wrapped.response is response
        assert wrapped.web_context is app_context

    def test_triple_immutable(self, wrapped: WebActionInvocation) -> None:
        with pytest.raises(AttributeError):
            wrapped.request = Request.from_url("GET", "/")  # type: ignore[misc]
        with pytest.raises(AttributeError):
            wrapped.invocation = None  # type: ignore[misc]

    def test_session_is_request_session(self, wrapped: WebActionInvocation, http_request: Request) -> None:
        wrapped.session["user"] = "alice"
        assert http_request.session["user"] == "alice"

    def test_request_parameters_view(self, wrapped: WebActionInvocation) -> None:
        params = wrapped.request_parameters
        assert isinstance(params, RequestParameters)
        assert params["tag"] == ("a", "b")
        assert wrapped.request_parameters is params

    def test_attributes_borrowed(self, bare: ActionInvocation, response: Response, app_context: AppContext) -> None:
        shared: dict[str, Any] = {}
        request = Request("GET", "/", QueryParams(""))
        wrapped = WebActionInvocation(bare, request, response, app_context, shared)
        wrapped.attributes["k"] = 1
        assert shared == {"k": 1}

    def test_repr(self, wrapped: WebActionInvocation) -> None:
        assert repr(wrapped) == "<WebActionInvocation GET '/sum'>"
