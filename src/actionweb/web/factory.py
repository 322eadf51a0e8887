"""WebActionFactory — invokes actions inside a web request.

Every invocation the engine creates is wrapped in a
``WebActionInvocation`` carrying the request, response and application
context, and its converter is rebound to that wrapper so action
parameters can be resolved from the request.

Where the request-scope objects come from, first match wins:

1. Explicit arguments: exactly ``(request, response, web_context)``,
   each of the expected type, as passed by ``invoke``.
2. Ambient state set by ``request_scope``.
3. Nowhere — the bare engine invocation is returned unchanged.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from actionweb.actions.converters import ConverterFactory
from actionweb.actions.factory import ActionFactory
from actionweb.actions.filters import ActionFilter
from actionweb.actions.invocation import Invocation
from actionweb.config import FactoryConfig
from actionweb.web import context
from actionweb.web.converters import RequestParameterConverterFactory
from actionweb.web.http import HttpRequest, HttpResponse, WebContext
from actionweb.web.invocation import WebActionInvocation

logger = logging.getLogger("actionweb.web")


def is_request_triple(params: tuple[Any, ...]) -> bool:
    """True if *params* is exactly ``(request, response, web_context)``."""
    return (
        len(params) == 3
        and isinstance(params[0], HttpRequest)
        and isinstance(params[1], HttpResponse)
        and isinstance(params[2], WebContext)
    )


class WebActionFactory(ActionFactory):
    """``ActionFactory`` whose invocations carry request scope.

    Usage::

        factory = WebActionFactory({"actionPathCaseSensitive": "false"})
        factory.add_actions(UserActions)
        factory.invoke("/Users/Show", request, response, app_context)

    When ``action_path_case_sensitive`` is off, paths are lowercased both
    when actions are registered and when ``invoke`` is called, so any
    casing matches.
    """

    __slots__ = ("_use_ambient_state",)

    def __init__(
        self,
        config: FactoryConfig | Mapping[str, Any] | None = None,
        *,
        converter_factory: ConverterFactory | None = None,
        action_filter: ActionFilter | None = None,
    ) -> None:
        super().__init__(
            config,
            converter_factory=converter_factory or RequestParameterConverterFactory(),
            action_filter=action_filter,
        )
        self._use_ambient_state = True

    @property
    def action_path_case_sensitive(self) -> bool:
        return self.config.action_path_case_sensitive

    def _normalize(self, path: str) -> str:
        return path if self.config.action_path_case_sensitive else path.lower()

    def invoke(
        self,
        path: str,
        request: HttpRequest,
        response: HttpResponse,
        web_context: WebContext,
    ) -> Any:
        """Invoke the action at *path* with explicit request-scope objects.

        Errors from the engine propagate unchanged.
        """
        return self.invoke_action(self._normalize(path), request, response, web_context)

    def build_action_path(self, namespace: str, name: str, method: Callable[..., Any]) -> str:
        return self._normalize(super().build_action_path(namespace, name, method))

    def create_action_invocation(self, path: str, *params: Any) -> Invocation:
        """Create the invocation for *path*, decorated with request scope if any.

        The engine invocation is built without arguments; arguments are
        produced later by the converter from ``convert_params``.
        """
        invocation = super().create_action_invocation(path)
        web_invocation: WebActionInvocation | None = None
        # Outside a request scope each invocation gets its own attribute map
        attributes = context.get_attributes()
        if attributes is None:
            attributes = {}

        if is_request_triple(params):
            request, response, web_context = params
            web_invocation = WebActionInvocation(
                invocation, request, response, web_context, attributes
            )

        if web_invocation is None and self._use_ambient_state:
            request = context.get_request()
            response = context.get_response()
            web_context = context.get_web_context()
            if request is not None and response is not None and web_context is not None:
                web_invocation = WebActionInvocation(
                    invocation, request, response, web_context, attributes
                )

        if self._use_ambient_state:
            context.set_invocation(web_invocation)

        if web_invocation is None:
            logger.debug("No request scope for %s; using bare invocation", path)
            return invocation

        # Converters receive the web invocation so they can read the request
        invocation.parameter_converter = self.converter_factory.get_parameter_converter(
            web_invocation
        )
        invocation.convert_params = (
            web_invocation.request,
            web_invocation.response,
            web_invocation.web_context,
            web_invocation,
        )
        return web_invocation
