"""Ambient request-scope state via ContextVar.

Holds, for the current thread or task, at most one each of: the
request, response and application context, the shared attribute map,
and the current web invocation.

The slots are owned by the dispatch boundary: ``request_scope`` sets
them when a request starts and resets them when it ends, including on
error. Everything else only reads them through the accessors below,
which never raise; an unset slot reads as ``None``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local across
    threads. No locks needed.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from actionweb.web.http import HttpRequest, HttpResponse, WebContext
    from actionweb.web.invocation import WebActionInvocation

_request_var: ContextVar[HttpRequest | None] = ContextVar("actionweb_request", default=None)
_response_var: ContextVar[HttpResponse | None] = ContextVar("actionweb_response", default=None)
_context_var: ContextVar[WebContext | None] = ContextVar("actionweb_context", default=None)
_attributes_var: ContextVar[MutableMapping[str, Any] | None] = ContextVar(
    "actionweb_attributes", default=None
)
_invocation_var: ContextVar[WebActionInvocation | None] = ContextVar(
    "actionweb_invocation", default=None
)


def get_request() -> HttpRequest | None:
    """Return the current request, or None outside a request scope."""
    return _request_var.get()


def get_response() -> HttpResponse | None:
    """Return the current response, or None outside a request scope."""
    return _response_var.get()


def get_web_context() -> WebContext | None:
    """Return the current application context, or None outside a request scope."""
    return _context_var.get()


def get_attributes() -> MutableMapping[str, Any] | None:
    """Return the attribute map of the current request, or None outside a request scope."""
    return _attributes_var.get()


def get_invocation() -> WebActionInvocation | None:
    """Return the web invocation most recently created in this scope."""
    return _invocation_var.get()


def set_invocation(invocation: WebActionInvocation | None) -> None:
    """Register *invocation* as the current one (None clears it)."""
    _invocation_var.set(invocation)


@contextmanager
def request_scope(
    request: HttpRequest,
    response: HttpResponse,
    web_context: WebContext,
    attributes: MutableMapping[str, Any] | None = None,
) -> Iterator[MutableMapping[str, Any]]:
    """Populate the ambient slots for the duration of one request.

    Yields the attribute map (a fresh dict unless *attributes* is
    given). Every slot, including the current invocation, is restored
    to its previous value on exit.

    Usage::

        with request_scope(request, response, app_context) as attributes:
            attributes["user"] = current_user
            factory.invoke(request.path, request, response, app_context)
    """
    if attributes is None:
        attributes = {}
    tokens = (
        (_request_var, _request_var.set(request)),
        (_response_var, _response_var.set(response)),
        (_context_var, _context_var.set(web_context)),
        (_attributes_var, _attributes_var.set(attributes)),
        (_invocation_var, _invocation_var.set(None)),
    )
    try:
        yield attributes
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
