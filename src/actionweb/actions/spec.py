"""Action metadata and the native ``@action`` marker.

``ActionSpec`` is the single descriptor the factory reads, whether it
comes from ``@action`` or is synthesized by an ``ActionFilter`` from a
foreign declaration style.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

ACTION_ATTR = "__action_spec__"
NAMESPACE_ATTR = "__action_namespace__"


class Scope(Enum):
    """Lifetime of the object an action method is bound to."""

    SINGLETON = "singleton"
    PROTOTYPE = "prototype"


@dataclass(frozen=True, slots=True)
class ResultSpec:
    """A named result an action may resolve to."""

    name: str
    type: str = ""
    location: str = ""


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """A static name/values parameter attached to an action."""

    name: str
    value: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ActionSpec:
    """Route metadata for one action method.

    ``value`` holds the path aliases. An empty ``value`` means "use the
    method name". ``origin`` tags where the spec came from: ``"action"``
    for the native marker, anything else for filter-synthesized specs.
    """

    value: tuple[str, ...] = ()
    interceptor_stack: str = ""
    interceptors: tuple[str, ...] = ()
    results: tuple[ResultSpec, ...] = ()
    scope: Scope = Scope.SINGLETON
    parameters: tuple[ParameterSpec, ...] = ()
    origin: str = "action"

    @property
    def name(self) -> tuple[str, ...]:
        """Alias of ``value``."""
        return self.value


def action(
    *value: str,
    interceptor_stack: str = "",
    interceptors: tuple[str, ...] = (),
    results: tuple[ResultSpec, ...] = (),
    scope: Scope = Scope.SINGLETON,
    parameters: tuple[ParameterSpec, ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Mark a function or method as an action.

    Usage::

        class UserActions:
            @action("/users/show", "/users/view")
            def show(self, request: HttpRequest) -> str: ...

            @action()  # path from the method name
            def list(self) -> list[str]: ...
    """
    spec = ActionSpec(
        value=tuple(value),
        interceptor_stack=interceptor_stack,
        interceptors=tuple(interceptors),
        results=tuple(results),
        scope=scope,
        parameters=tuple(parameters),
    )

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, ACTION_ATTR, spec)
        return func

    return decorator


def namespace(name: str) -> Callable[[type], type]:
    """Prefix every action path declared on a class with *name*."""

    def decorator(cls: type) -> type:
        setattr(cls, NAMESPACE_ATTR, name)
        return cls

    return decorator


def get_action_spec(method: Any) -> ActionSpec | None:
    """Return the native ``@action`` spec of *method*, or None."""
    spec = getattr(method, ACTION_ATTR, None)
    return spec if isinstance(spec, ActionSpec) else None
