"""Request-aware parameter conversion.

Extends type-based matching with lookup by name in the request
parameters of the web invocation the converter was created for::

    @action("/users/show")
    def show(self, user_id: int, tags: list[str], response: HttpResponse) -> str:
        ...

    # /users/show?user_id=42&tags=a&tags=b
    #   user_id  -> 42          (first value, converted to int)
    #   tags     -> ["a", "b"]  (all values)
    #   response -> the current response (matched by type)

Scalar conversion covers ``int``, ``float`` and ``bool``; ``str`` values
are passed through exactly as received.
A value that fails conversion is passed through as the raw string.
"""

from __future__ import annotations

import inspect
import typing
from typing import Any

from actionweb.actions.converters import _MISSING, MultiParameterConverter
from actionweb.web.invocation import WebActionInvocation

_SEQUENCE_TYPES = (list, tuple)


class RequestParameterConverter(MultiParameterConverter):
    """``MultiParameterConverter`` that also resolves parameters by name.

    Only active when bound to a ``WebActionInvocation``; otherwise it
    behaves exactly like its base class.
    """

    __slots__ = ()

    def _lookup(self, name: str, param: inspect.Parameter) -> Any:
        invocation = self.invocation
        if not isinstance(invocation, WebActionInvocation):
            return _MISSING
        parameters = invocation.request_parameters
        if name not in parameters:
            return _MISSING

        values = parameters[name]
        annotation = param.annotation
        origin = typing.get_origin(annotation) or annotation
        if origin in _SEQUENCE_TYPES:
            args = typing.get_args(annotation)
            item_type = args[0] if args else str
            converted = [_convert(v, item_type) for v in values]
            return tuple(converted) if origin is tuple else converted
        return _convert(values[0], annotation)


class RequestParameterConverterFactory:
    """Converter factory used by ``WebActionFactory`` by default."""

    __slots__ = ()

    def get_parameter_converter(
        self, invocation: Any = None
    ) -> RequestParameterConverter:
        return RequestParameterConverter(invocation)


def _convert(value: str, target_type: Any) -> Any:
    """Convert *value* to *target_type*, returning *value* unchanged on failure."""
    if target_type is int:
        try:
            return int(value)
        except ValueError:
            return value

    if target_type is float:
        try:
            return float(value)
        except ValueError:
            return value

    if target_type is bool:
        return value.lower() in ("true", "1", "yes", "on")

    # str, unknown or missing annotation: raw value
    return value
