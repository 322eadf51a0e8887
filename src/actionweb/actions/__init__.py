"""Action engine — registration, invocation and argument conversion.

Actions are plain callables marked with ``@action`` (or discovered
through an ``ActionFilter``) and invoked by path.
"""
