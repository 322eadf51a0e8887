"""Invocation handles — one in-flight action call.

``ActionInvocation`` is created by the factory for a single call and
never shared between calls. Its converter and converted inputs can be
swapped until it executes; after that they are fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from actionweb.actions.converters import ParameterConverter
from actionweb.actions.spec import ResultSpec
from actionweb.errors import InvocationError, RoutingError

if TYPE_CHECKING:
    from actionweb.actions.factory import ActionFactory
    from actionweb.actions.proxy import ActionProxy


class Invocation(Protocol):
    """The operations every invocation handle exposes."""

    @property
    def action_factory(self) -> ActionFactory: ...
    @property
    def action_proxy(self) -> ActionProxy: ...
    @property
    def executed(self) -> bool: ...
    @property
    def params(self) -> tuple[Any, ...]: ...

    invoke_result: Any
    result: ResultSpec | None
    parameter_converter: ParameterConverter | None
    convert_params: tuple[Any, ...]

    def invoke(self, *params: Any) -> Any: ...


class ActionInvocation:
    """The bare invocation handle built by ``ActionFactory``."""

    __slots__ = (
        "_convert_params",
        "_converter",
        "_executed",
        "_factory",
        "_params",
        "_proxy",
        "invoke_result",
        "result",
    )

    def __init__(
        self,
        factory: ActionFactory,
        proxy: ActionProxy,
        params: tuple[Any, ...] = (),
        converter: ParameterConverter | None = None,
    ) -> None:
        self._factory = factory
        self._proxy = proxy
        self._params: tuple[Any, ...] = tuple(params)
        self._convert_params: tuple[Any, ...] = ()
        self._converter = converter
        self._executed = False
        self.invoke_result: Any = None
        self.result: ResultSpec | None = None

    def __repr__(self) -> str:
        return f"<ActionInvocation {self._proxy.path!r} executed={self._executed}>"

    @property
    def action_factory(self) -> ActionFactory:
        return self._factory

    @property
    def action_proxy(self) -> ActionProxy:
        return self._proxy

    @property
    def path(self) -> str:
        return self._proxy.path

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def params(self) -> tuple[Any, ...]:
        """Raw arguments of the call. Set when the invocation executes."""
        return self._params

    @property
    def parameter_converter(self) -> ParameterConverter | None:
        return self._converter

    @parameter_converter.setter
    def parameter_converter(self, converter: ParameterConverter | None) -> None:
        self._check_not_executed()
        self._converter = converter

    @property
    def convert_params(self) -> tuple[Any, ...]:
        """Extra inputs handed to the converter alongside the raw arguments."""
        return self._convert_params

    @convert_params.setter
    def convert_params(self, params: tuple[Any, ...]) -> None:
        self._check_not_executed()
        self._convert_params = tuple(params)

    def invoke(self, *params: Any) -> Any:
        """Execute the action with *params* as the raw arguments.

        Raises ``RuntimeError`` if the invocation already executed.
        Errors from the converter or the action are raised as
        ``InvocationError``; ``RoutingError`` passes through as-is.
        """
        self._check_not_executed()
        self._params = tuple(params)
        converter = self._converter
        if converter is None:
            converter = self._factory.converter_factory.get_parameter_converter(None)
        try:
            result = self._proxy.invoke(converter, self._params, self._convert_params)
        except RoutingError:
            raise
        except Exception as exc:
            raise InvocationError(self._proxy.path, f"{type(exc).__name__}: {exc}") from exc
        finally:
            self._executed = True
        self.invoke_result = result
        return result

    def _check_not_executed(self) -> None:
        if self._executed:
            msg = f"Invocation of {self._proxy.path!r} has already executed."
            raise RuntimeError(msg)
