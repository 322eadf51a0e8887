"""actionweb — run a path-based action router inside web requests.

Actions are invoked by path; the web factory hands each one the
request, response and application context of the request it runs in.

Basic usage::

    from actionweb import WebActionFactory, action

    class Greeter:
        @action("/hello")
        def hello(self, name: str = "world") -> str:
            return f"Hello, {name}!"

    factory = WebActionFactory()
    factory.add_actions(Greeter)
    factory.invoke("/hello", request, response, app_context)
"""

__version__ = "0.1.0"
__all__ = [
    "ActionDispatcher",
    "ActionFactory",
    "ActionNotFound",
    "ActionSpec",
    "ActionWebError",
    "AppContext",
    "ConfigurationError",
    "FactoryConfig",
    "InvocationError",
    "Request",
    "RequestMappingActionFilter",
    "Response",
    "RoutingError",
    "Scope",
    "WebActionFactory",
    "WebActionInvocation",
    "action",
    "namespace",
    "request_mapping",
    "request_scope",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ActionDispatcher": "actionweb.web.dispatch",
    "ActionFactory": "actionweb.actions.factory",
    "ActionNotFound": "actionweb.errors",
    "ActionSpec": "actionweb.actions.spec",
    "ActionWebError": "actionweb.errors",
    "AppContext": "actionweb.web.http",
    "ConfigurationError": "actionweb.errors",
    "FactoryConfig": "actionweb.config",
    "InvocationError": "actionweb.errors",
    "Request": "actionweb.web.http",
    "RequestMappingActionFilter": "actionweb.web.mapping",
    "Response": "actionweb.web.http",
    "RoutingError": "actionweb.errors",
    "Scope": "actionweb.actions.spec",
    "WebActionFactory": "actionweb.web.factory",
    "WebActionInvocation": "actionweb.web.invocation",
    "action": "actionweb.actions.spec",
    "namespace": "actionweb.actions.spec",
    "request_mapping": "actionweb.web.mapping",
    "request_scope": "actionweb.web.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import actionweb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
