"""``@request_mapping`` discovery.

Lets handler classes declared in the mapping style be registered with
the action engine::

    class UserController:
        @request_mapping("/users", "/people")
        def list_users(self) -> list[str]: ...

        @request_mapping(name="byId")
        def fetch_user(self, user_id: int) -> str: ...

    factory = WebActionFactory(action_filter=RequestMappingActionFilter())
    factory.add_actions(UserController)

A method that also carries the native ``@action`` marker is left to the
engine: the native spec wins.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, overload

from actionweb.actions.spec import ActionSpec, Scope, get_action_spec

MAPPING_ATTR = "__request_mapping__"


@dataclass(frozen=True, slots=True)
class RequestMapping:
    """The mapping declared on one method."""

    value: tuple[str, ...] = ()
    path: tuple[str, ...] = ()
    name: str = ""


_Func = Callable[..., Any]


@overload
def request_mapping(func: _Func, /) -> _Func: ...
@overload
def request_mapping(*value: str, path: tuple[str, ...] = (), name: str = "") -> Callable[[_Func], _Func]: ...


def request_mapping(*value: Any, path: tuple[str, ...] = (), name: str = "") -> Any:
    """Mark a method as mapped to one or more paths.

    Usable bare (``@request_mapping``) or with arguments. A bare string
    for *path* is treated as a single path.
    """
    if len(value) == 1 and callable(value[0]):
        func = value[0]
        setattr(func, MAPPING_ATTR, RequestMapping())
        return func

    mapping = RequestMapping(
        value=tuple(value),
        path=(path,) if isinstance(path, str) else tuple(path),
        name=name,
    )

    def decorator(func: _Func) -> _Func:
        setattr(func, MAPPING_ATTR, mapping)
        return func

    return decorator


def get_request_mapping(method: Any) -> RequestMapping | None:
    mapping = getattr(method, MAPPING_ATTR, None)
    return mapping if isinstance(mapping, RequestMapping) else None


def resolve_aliases(mapping: RequestMapping, method: _Func) -> tuple[str, ...]:
    """Path aliases for *mapping*: value, else path, else name, else method name."""
    if mapping.value:
        return mapping.value
    if mapping.path:
        return mapping.path
    if mapping.name.strip():
        return (mapping.name,)
    return (method.__name__,)


class RequestMappingActionFilter:
    """``ActionFilter`` that turns ``@request_mapping`` into an ``ActionSpec``.

    Stateless and pure: safe to share and to call repeatedly from any
    thread.
    """

    __slots__ = ()

    def accepts(self, method: _Func) -> bool:
        return get_request_mapping(method) is not None

    def describe(self, method: _Func) -> ActionSpec | None:
        if get_action_spec(method) is not None:
            return None
        mapping = get_request_mapping(method)
        if mapping is None:
            return None
        return ActionSpec(
            value=resolve_aliases(mapping, method),
            scope=Scope.SINGLETON,
            origin="request_mapping",
        )
