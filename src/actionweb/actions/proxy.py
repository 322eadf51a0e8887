"""ActionProxy — a registered action, bound to its path."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from actionweb.actions.converters import ParameterConverter
from actionweb.actions.spec import ActionSpec, Scope


@dataclass(frozen=True, slots=True)
class ActionProxy:
    """A frozen action registration.

    ``method`` is the plain function as declared. ``owner`` is the class
    it was declared on (None for module-level functions). Singleton
    actions keep the bound instance in ``instance``; prototype actions
    build a new ``owner()`` per call.
    """

    path: str
    method: Callable[..., Any]
    spec: ActionSpec
    namespace: str = ""
    owner: type | None = None
    instance: Any = field(default=None, compare=False)

    @property
    def scope(self) -> Scope:
        return self.spec.scope

    def target(self) -> Callable[..., Any]:
        """Return the callable to invoke, bound per the action's scope."""
        if self.owner is None:
            return self.method
        if self.spec.scope is Scope.PROTOTYPE:
            return self.method.__get__(self.owner())
        return self.method.__get__(self.instance)

    def invoke(
        self,
        converter: ParameterConverter,
        original_params: tuple[Any, ...],
        convert_params: tuple[Any, ...],
    ) -> Any:
        """Convert the inputs and call the action."""
        target = self.target()
        args = converter.convert(target, original_params, convert_params)
        return target(*args)
