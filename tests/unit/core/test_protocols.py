"""Tests for the invocation ledger protocol and derived queries."""

from dataclasses import dataclass, field

import pytest

from mockfunc.core.errors import EmptyInvocationHistoryError
from mockfunc.core.protocols import InvocationQueries, MockFuncInvoking
from mockfunc.mock_func import MockFunc


@dataclass
class RecordingSpy(InvocationQueries[str]):
    """Minimal ledger owner relying on the mixin for queries."""

    recorded: list[str] = field(default_factory=list)

    @property
    def invocations(self) -> list[str]:
        return self.recorded


class TestInvocationQueries:
    def test_empty_ledger(self) -> None:
        spy = RecordingSpy()
        assert spy.invocation_count == 0
        assert spy.was_called is False
        assert spy.was_called_exactly_once is False

    def test_single_invocation(self) -> None:
        spy = RecordingSpy(["a"])
        assert spy.invocation_count == 1
        assert spy.was_called is True
        assert spy.was_called_exactly_once is True
        assert spy.last_input == "a"

    def test_multiple_invocations(self) -> None:
        spy = RecordingSpy(["a", "b", "a"])
        assert spy.invocation_count == 3
        assert spy.was_called is True
        assert spy.was_called_exactly_once is False
        assert spy.last_input == "a"

    def test_last_input_on_empty_ledger(self) -> None:
        with pytest.raises(EmptyInvocationHistoryError, match="last_input"):
            _ = RecordingSpy().last_input

    def test_invocations_must_be_provided(self) -> None:
        class NoLedger(InvocationQueries[str]):
            pass

        with pytest.raises(TypeError, match="invocations"):
            NoLedger()


class TestMockFuncInvoking:
    def test_mock_func_implements_protocol(self) -> None:
        assert isinstance(MockFunc[str, int](), MockFuncInvoking)

    def test_spy_implements_protocol(self) -> None:
        assert isinstance(RecordingSpy(), MockFuncInvoking)

    def test_plain_object_does_not(self) -> None:
        assert not isinstance(object(), MockFuncInvoking)
