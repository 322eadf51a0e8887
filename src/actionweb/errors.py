"""actionweb exception hierarchy.

Shared across the action engine, the web factory and the dispatcher so
every module raises and catches the same types.
"""


class ActionWebError(Exception):
    """Base for all actionweb-specific errors."""


class ConfigurationError(ActionWebError):
    """Raised when factory configuration or action registration is invalid.

    Typically raised at startup, while actions are being added.
    """


class RoutingError(ActionWebError):
    """Raised by the engine when an action cannot be found or executed.

    Surfaced verbatim through the web factory; nothing above the engine
    translates it.
    """

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(path, detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return self.path


class ActionNotFound(RoutingError):  # noqa: N818 conventional name for routing errors
    """No action is registered under the requested path."""

    def __init__(self, path: str, detail: str = "No action registered") -> None:
        super().__init__(path, detail)


class InvocationError(RoutingError):
    """The action, or the converter preparing its arguments, raised.

    The original exception is chained as ``__cause__``.
    """
