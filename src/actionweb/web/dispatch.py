"""Dispatch boundary — runs one request through the web factory.

The dispatcher owns the ambient request state: it opens
``request_scope`` before invoking and the scope is always closed when
the request finishes, so nothing leaks into the next request served on
the same thread.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from actionweb.errors import ActionNotFound
from actionweb.web.context import request_scope
from actionweb.web.factory import WebActionFactory
from actionweb.web.http import HttpRequest, HttpResponse, WebContext

logger = logging.getLogger("actionweb.web")


class ActionDispatcher:
    """Maps each request path to an action and invokes it.

    Usage::

        dispatcher = ActionDispatcher(factory, AppContext("shop"))
        result = dispatcher.dispatch(request, response)
    """

    __slots__ = ("_factory", "_web_context")

    def __init__(self, factory: WebActionFactory, web_context: WebContext) -> None:
        self._factory = factory
        self._web_context = web_context

    @property
    def factory(self) -> WebActionFactory:
        return self._factory

    def dispatch(
        self,
        request: HttpRequest,
        response: HttpResponse,
        attributes: MutableMapping[str, Any] | None = None,
    ) -> Any:
        """Invoke the action for ``request.path``.

        A missing action sets ``response.status`` to 404 and returns
        None. Any other error propagates after the scope is closed.
        """
        with request_scope(request, response, self._web_context, attributes):
            try:
                return self._factory.invoke(
                    request.path, request, response, self._web_context
                )
            except ActionNotFound as exc:
                logger.debug("404 %s %s — %s", request.method, request.path, exc.detail)
                response.status = 404
                return None
