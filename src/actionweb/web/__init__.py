"""Web integration — request-scoped invocations and mapping-based discovery.

``WebActionFactory`` wraps each invocation with the request, response
and application context of the current request, taken from explicit
arguments or from the ambient state set by ``request_scope``.
"""
