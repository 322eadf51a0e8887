"""Tests for actionweb.actions.invocation — the bare invocation handle."""

from typing import Any

import pytest

from actionweb.actions.converters import MultiParameterConverter
from actionweb.actions.factory import ActionFactory
from actionweb.actions.spec import ResultSpec, action
from actionweb.errors import InvocationError


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    @action("/record")
    def record(self, *args: Any) -> int:
        self.calls.append(args)
        return len(args)

    @action("/explode")
    def explode(self) -> None:
        raise KeyError("gone")


class FixedConverter:
    """Ignores its inputs and always passes the same arguments."""

    def __init__(self, *args: Any) -> None:
        self.args = args

    def convert(self, method: Any, original_params: Any, convert_params: Any) -> tuple[Any, ...]:
        return self.args


@pytest.fixture
def factory() -> ActionFactory:
    factory = ActionFactory()
    factory.add_actions(Recorder)
    return factory


class TestInvocationLifecycle:
    def test_initial_state(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        assert invocation.executed is False
        assert invocation.invoke_result is None
        assert invocation.result is None
        assert invocation.convert_params == ()
        assert invocation.path == "/record"  # type: ignore[attr-defined]

    def test_invoke_records_params_and_result(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        assert invocation.invoke(1, 2) == 2
        assert invocation.executed is True
        assert invocation.params == (1, 2)
        assert invocation.invoke_result == 2

    def test_executes_once(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        invocation.invoke()
        with pytest.raises(RuntimeError, match="already executed"):
            invocation.invoke()

    def test_executed_even_when_action_fails(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/explode")
        with pytest.raises(InvocationError):
            invocation.invoke()
        assert invocation.executed is True

    def test_result_descriptor_settable(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        invocation.result = ResultSpec("ok")
        assert invocation.result == ResultSpec("ok")

    def test_repr(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        assert "'/record'" in repr(invocation)


class TestConverterWiring:
    def test_replacement_converter_used(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        invocation.parameter_converter = FixedConverter("a", "b", "c")
        assert invocation.invoke() == 3

    def test_convert_params_reach_converter(self, factory: ActionFactory) -> None:
        seen: list[tuple[Any, ...]] = []

        class Spy(MultiParameterConverter):
            def convert(self, method: Any, original_params: Any, convert_params: Any) -> Any:
                seen.append(tuple(convert_params))
                return super().convert(method, original_params, convert_params)

        invocation = factory.create_action_invocation("/record")
        invocation.parameter_converter = Spy()
        invocation.convert_params = ("x", "y")
        invocation.invoke()
        assert seen == [("x", "y")]

    def test_converter_fixed_after_execution(self, factory: ActionFactory) -> None:
        invocation = factory.create_action_invocation("/record")
        invocation.invoke()
        with pytest.raises(RuntimeError):
            invocation.parameter_converter = FixedConverter()
        with pytest.raises(RuntimeError):
            invocation.convert_params = ()
