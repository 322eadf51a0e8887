"""ActionFactory — registers actions and invokes them by path.

Setup registers actions with ``add_actions``; at runtime
``invoke_action(path, *params)`` creates one invocation per call.
Subclasses customize path building and invocation creation through
``build_action_path`` and ``create_action_invocation``.
"""

import inspect
import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from actionweb.actions.converters import ConverterFactory, MultiParameterConverterFactory
from actionweb.actions.filters import ActionFilter
from actionweb.actions.invocation import ActionInvocation, Invocation
from actionweb.actions.proxy import ActionProxy
from actionweb.actions.spec import NAMESPACE_ATTR, ActionSpec, Scope, get_action_spec
from actionweb.config import FactoryConfig
from actionweb.errors import ActionNotFound, ConfigurationError

logger = logging.getLogger("actionweb.actions")


class ActionFactory:
    """Action registry and invoker.

    Usage::

        factory = ActionFactory()
        factory.add_actions(UserActions)
        user = factory.invoke_action("/users/show", 42)

    Thread safety:
        Registration is single-threaded setup. Invocation only reads the
        registry; all per-call state lives on the invocation handle.
    """

    __slots__ = ("_action_filter", "_actions", "_config", "_converter_factory")

    def __init__(
        self,
        config: FactoryConfig | Mapping[str, Any] | None = None,
        *,
        converter_factory: ConverterFactory | None = None,
        action_filter: ActionFilter | None = None,
    ) -> None:
        if config is None:
            config = FactoryConfig()
        elif not isinstance(config, FactoryConfig):
            config = FactoryConfig.from_mapping(config)
        self._config: FactoryConfig = config
        self._converter_factory: ConverterFactory = (
            converter_factory or MultiParameterConverterFactory()
        )
        self._action_filter = action_filter
        self._actions: dict[str, ActionProxy] = {}

    @property
    def config(self) -> FactoryConfig:
        return self._config

    @property
    def converter_factory(self) -> ConverterFactory:
        return self._converter_factory

    @property
    def action_filter(self) -> ActionFilter | None:
        return self._action_filter

    @property
    def actions(self) -> Mapping[str, ActionProxy]:
        """Registered actions keyed by path (read-only view)."""
        return MappingProxyType(self._actions)

    # -- Registration --

    def add_actions(self, target: Any) -> list[ActionProxy]:
        """Register every action declared on *target*.

        *target* may be a class (instantiated once for singleton actions),
        an instance, or a plain function.

        Raises ``ConfigurationError`` when a path is already registered.
        """
        if inspect.isfunction(target):
            return self._add_methods(None, None, "", [(target.__name__, target)])

        owner = target if isinstance(target, type) else type(target)
        ns = getattr(owner, NAMESPACE_ATTR, "")
        members = [
            (name, member)
            for name, member in inspect.getmembers(owner, inspect.isfunction)
            if not name.startswith("_")
        ]
        instance = None if isinstance(target, type) else target
        return self._add_methods(owner, instance, ns, members)

    def _add_methods(
        self,
        owner: type | None,
        instance: Any,
        ns: str,
        members: list[tuple[str, Callable[..., Any]]],
    ) -> list[ActionProxy]:
        added: list[ActionProxy] = []
        for _name, method in members:
            spec = self._describe(method)
            if spec is None:
                continue
            bound_instance = instance
            if owner is not None and bound_instance is None and spec.scope is Scope.SINGLETON:
                bound_instance = owner()
                instance = bound_instance
            # Check every alias before registering any of them
            paths: list[str] = []
            for alias in spec.value or ("",):
                path = self.build_action_path(ns, alias, method)
                if path in self._actions or path in paths:
                    existing = self._actions[path].method if path in self._actions else method
                    msg = (
                        f"Duplicate action path {path!r}: "
                        f"{method.__qualname__} conflicts with {existing.__qualname__}."
                    )
                    raise ConfigurationError(msg)
                paths.append(path)
            for path in paths:
                proxy = ActionProxy(
                    path=path,
                    method=method,
                    spec=spec,
                    namespace=ns,
                    owner=owner,
                    instance=bound_instance,
                )
                self._actions[path] = proxy
                added.append(proxy)
                logger.debug("Registered action %s -> %s", path, method.__qualname__)
        return added

    def _describe(self, method: Callable[..., Any]) -> ActionSpec | None:
        """Filter spec first when the filter accepts *method*, else the native spec."""
        if self._action_filter is not None and self._action_filter.accepts(method):
            spec = self._action_filter.describe(method)
            if spec is not None:
                return spec
        return get_action_spec(method)

    def build_action_path(self, namespace: str, name: str, method: Callable[..., Any]) -> str:
        """Join *namespace* and *name* into an action path.

        An empty *name* falls back to the method name. A *name* starting
        with the separator is absolute and ignores the namespace.
        """
        sep = self._config.path_separator
        name = name or method.__name__
        path = name if name.startswith(sep) else f"{namespace}{sep}{name}"
        if not path.startswith(sep):
            path = sep + path
        return re.sub(f"(?:{re.escape(sep)})+", sep, path)

    # -- Invocation --

    def _lookup(self, path: str) -> ActionProxy:
        try:
            return self._actions[path]
        except KeyError:
            raise ActionNotFound(path) from None

    def create_action_invocation(self, path: str, *params: Any) -> Invocation:
        """Create the invocation handle for one call to *path*.

        Raises ``ActionNotFound`` if no action is registered at *path*.
        """
        proxy = self._lookup(path)
        return ActionInvocation(
            self,
            proxy,
            params,
            converter=self._converter_factory.get_parameter_converter(None),
        )

    def invoke_action(self, path: str, *params: Any) -> Any:
        """Invoke the action at *path* with *params* as raw arguments."""
        invocation = self.create_action_invocation(path, *params)
        return invocation.invoke(*params)
