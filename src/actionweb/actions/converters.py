"""Parameter converters — turn call inputs into an action's arguments.

A converter receives the bound action callable, the raw arguments the
caller passed (``original_params``) and the extra inputs the invocation
prepared for conversion (``convert_params``), and returns the positional
arguments to call the action with.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from actionweb.actions.invocation import Invocation

# Sentinel for "no value resolved"
_MISSING: Any = object()


class ParameterConverter(Protocol):
    """Produces the positional arguments for one action call."""

    def convert(
        self,
        method: Callable[..., Any],
        original_params: Sequence[Any],
        convert_params: Sequence[Any],
    ) -> tuple[Any, ...]: ...


class ConverterFactory(Protocol):
    """Hands out converters, optionally bound to an invocation."""

    def get_parameter_converter(
        self, invocation: Invocation | None = None
    ) -> ParameterConverter: ...


def matches_type(value: Any, annotation: Any) -> bool:
    """True if *value* is an instance of *annotation*.

    Annotations ``isinstance`` cannot check (``Any``, subscripted
    generics, strings) never match.
    """
    if annotation is inspect.Parameter.empty or annotation is Any:
        return False
    try:
        return isinstance(value, annotation)
    except TypeError:
        return False


class MultiParameterConverter:
    """Match action parameters to the supplied values by type.

    Resolution order, per parameter:

    1. First ``convert_params`` value matching the annotation
    2. First unclaimed ``original_params`` value matching the annotation
    3. ``_lookup`` hook (subclasses resolve by name here)
    4. Next unclaimed ``original_params`` value (unannotated parameters only)
    5. The parameter default, else ``None``

    A ``*args`` parameter receives every original value not yet claimed.
    """

    __slots__ = ("_invocation",)

    def __init__(self, invocation: Invocation | None = None) -> None:
        self._invocation = invocation

    @property
    def invocation(self) -> Invocation | None:
        return self._invocation

    def convert(
        self,
        method: Callable[..., Any],
        original_params: Sequence[Any],
        convert_params: Sequence[Any],
    ) -> tuple[Any, ...]:
        sig = inspect.signature(method, eval_str=True)
        claimed: set[int] = set()  # indices into original_params
        args: list[Any] = []

        for name, param in sig.parameters.items():
            if param.kind is inspect.Parameter.VAR_KEYWORD:
                continue
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                args.extend(v for i, v in enumerate(original_params) if i not in claimed)
                break
            if param.kind is inspect.Parameter.KEYWORD_ONLY:
                # Positional call only; keyword-only params keep their defaults
                continue

            value = self._resolve(name, param, original_params, convert_params, claimed)
            if value is _MISSING:
                value = None if param.default is inspect.Parameter.empty else param.default
            args.append(value)

        return tuple(args)

    def _resolve(
        self,
        name: str,
        param: inspect.Parameter,
        original_params: Sequence[Any],
        convert_params: Sequence[Any],
        claimed: set[int],
    ) -> Any:
        annotation = param.annotation
        for value in convert_params:
            if matches_type(value, annotation):
                return value
        for index, value in enumerate(original_params):
            if index not in claimed and matches_type(value, annotation):
                claimed.add(index)
                return value

        value = self._lookup(name, param)
        if value is not _MISSING:
            return value

        if annotation is inspect.Parameter.empty:
            for index, value in enumerate(original_params):
                if index not in claimed:
                    claimed.add(index)
                    return value
        return _MISSING

    def _lookup(self, name: str, param: inspect.Parameter) -> Any:
        """Resolve a parameter no supplied value matched. Returns ``_MISSING``."""
        return _MISSING


class MultiParameterConverterFactory:
    """Default converter factory: one ``MultiParameterConverter`` per call."""

    __slots__ = ()

    def get_parameter_converter(
        self, invocation: Invocation | None = None
    ) -> MultiParameterConverter:
        return MultiParameterConverter(invocation)
