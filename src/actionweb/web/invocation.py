"""WebActionInvocation — an invocation handle carrying request scope.

Wraps one engine invocation by delegation: every base operation is
forwarded explicitly to the wrapped handle, and the request-scope
accessors are additive. The wrapped handle and the request, response
and application context never change after construction.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from actionweb.actions.converters import ParameterConverter
from actionweb.actions.invocation import Invocation
from actionweb.actions.spec import ResultSpec
from actionweb.web.http import HttpRequest, HttpResponse, WebContext
from actionweb.web.params import RequestParameters

if TYPE_CHECKING:
    from actionweb.actions.factory import ActionFactory
    from actionweb.actions.proxy import ActionProxy


class WebActionInvocation:
    """An invocation decorated with the request, response and app context.

    ``attributes`` is borrowed from whoever owns the request (usually
    ``request_scope``); the invocation reads and writes it but does not
    own its lifetime.
    """

    __slots__ = (
        "_attributes",
        "_invocation",
        "_request",
        "_request_parameters",
        "_response",
        "_web_context",
    )

    def __init__(
        self,
        invocation: Invocation,
        request: HttpRequest,
        response: HttpResponse,
        web_context: WebContext,
        attributes: MutableMapping[str, Any],
    ) -> None:
        self._invocation = invocation
        self._request = request
        self._response = response
        self._web_context = web_context
        self._attributes = attributes
        self._request_parameters: RequestParameters | None = None

    def __repr__(self) -> str:
        return f"<WebActionInvocation {self._request.method} {self._invocation.action_proxy.path!r}>"

    # -- Forwarded to the wrapped invocation --

    @property
    def invocation(self) -> Invocation:
        """The wrapped engine invocation."""
        return self._invocation

    @property
    def action_factory(self) -> ActionFactory:
        return self._invocation.action_factory

    @property
    def action_proxy(self) -> ActionProxy:
        return self._invocation.action_proxy

    @property
    def executed(self) -> bool:
        return self._invocation.executed

    @property
    def params(self) -> tuple[Any, ...]:
        return self._invocation.params

    @property
    def invoke_result(self) -> Any:
        return self._invocation.invoke_result

    @invoke_result.setter
    def invoke_result(self, value: Any) -> None:
        self._invocation.invoke_result = value

    @property
    def result(self) -> ResultSpec | None:
        return self._invocation.result

    @result.setter
    def result(self, value: ResultSpec | None) -> None:
        self._invocation.result = value

    @property
    def parameter_converter(self) -> ParameterConverter | None:
        return self._invocation.parameter_converter

    @parameter_converter.setter
    def parameter_converter(self, converter: ParameterConverter | None) -> None:
        self._invocation.parameter_converter = converter

    @property
    def convert_params(self) -> tuple[Any, ...]:
        return self._invocation.convert_params

    @convert_params.setter
    def convert_params(self, params: tuple[Any, ...]) -> None:
        self._invocation.convert_params = params

    def invoke(self, *params: Any) -> Any:
        return self._invocation.invoke(*params)

    # -- Request scope --

    @property
    def request(self) -> HttpRequest:
        return self._request

    @property
    def response(self) -> HttpResponse:
        return self._response

    @property
    def web_context(self) -> WebContext:
        return self._web_context

    @property
    def session(self) -> MutableMapping[str, Any]:
        return self._request.session

    @property
    def request_parameters(self) -> RequestParameters:
        """Read-only name -> values view of the request parameters. Built on first use."""
        if self._request_parameters is None:
            self._request_parameters = RequestParameters(self._request.parameters)
        return self._request_parameters

    @property
    def attributes(self) -> MutableMapping[str, Any]:
        return self._attributes
