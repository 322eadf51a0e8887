"""ActionFilter protocol — pluggable action discovery.

A filter lets the factory discover actions declared with a foreign
marker. ``accepts`` selects candidate methods; ``describe`` returns the
synthesized spec, or None to fall back to the native ``@action`` spec.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from actionweb.actions.spec import ActionSpec


@runtime_checkable
class ActionFilter(Protocol):
    def accepts(self, method: Callable[..., Any]) -> bool: ...
    def describe(self, method: Callable[..., Any]) -> ActionSpec | None: ...
