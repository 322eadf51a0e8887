"""Tests for actionweb.actions.spec — ActionSpec and the @action marker."""

import pytest

from actionweb.actions.spec import (
    ActionSpec,
    ParameterSpec,
    ResultSpec,
    Scope,
    action,
    get_action_spec,
    namespace,
)


class TestActionSpec:
    def test_defaults(self) -> None:
        spec = ActionSpec()
        assert spec.value == ()
        assert spec.interceptor_stack == ""
        assert spec.interceptors == ()
        assert spec.results == ()
        assert spec.scope is Scope.SINGLETON
        assert spec.parameters == ()
        assert spec.origin == "action"

    def test_name_mirrors_value(self) -> None:
        spec = ActionSpec(value=("/a", "/b"))
        assert spec.name == ("/a", "/b")

    def test_frozen(self) -> None:
        spec = ActionSpec()
        with pytest.raises(AttributeError):
            spec.value = ("/x",)  # type: ignore[misc]


class TestActionDecorator:
    def test_attaches_spec(self) -> None:
        @action("/users", "/people", scope=Scope.PROTOTYPE)
        def users() -> None: ...

        spec = get_action_spec(users)
        assert spec is not None
        assert spec.value == ("/users", "/people")
        assert spec.scope is Scope.PROTOTYPE

    def test_returns_same_function(self) -> None:
        def handler() -> None: ...

        assert action("/x")(handler) is handler

    def test_results_and_parameters(self) -> None:
        @action(
            results=(ResultSpec("ok", type="json"),),
            parameters=(ParameterSpec("mode", ("fast",)),),
        )
        def handler() -> None: ...

        spec = get_action_spec(handler)
        assert spec is not None
        assert spec.results[0].name == "ok"
        assert spec.parameters[0].value == ("fast",)

    def test_undecorated_has_no_spec(self) -> None:
        def plain() -> None: ...

        assert get_action_spec(plain) is None

    def test_spec_visible_through_bound_method(self) -> None:
        class Actions:
            @action("/x")
            def x(self) -> None: ...

        assert get_action_spec(Actions().x) is not None


class TestNamespace:
    def test_sets_namespace_attribute(self) -> None:
        @namespace("/users")
        class Users: ...

        assert Users.__action_namespace__ == "/users"  # type: ignore[attr-defined]
