"""Protocol for objects that record invocations of a mocked function.

Any object exposing an ordered ``invocations`` list can mix in
InvocationQueries to get the derived read-only queries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

from mockfunc.core.errors import EmptyInvocationHistoryError
from mockfunc.core.models import Input

Input_co = TypeVar("Input_co", covariant=True)


@runtime_checkable
class MockFuncInvoking(Protocol[Input_co]):
    """Protocol for mock containers that keep an invocation ledger."""

    @property
    def invocations(self) -> Sequence[Input_co]:
        """All arguments passed to the mocked function, in call order."""
        ...


class InvocationQueries(ABC, Generic[Input]):
    """Derived queries computed from ``invocations``.

    Subclasses must provide ``invocations``.
    """

    @property
    @abstractmethod
    def invocations(self) -> list[Input]:
        """All arguments passed to the mocked function, in call order."""

    @property
    def invocation_count(self) -> int:
        """How many times the function was called."""
        return len(self.invocations)

    @property
    def was_called(self) -> bool:
        """True if the function was called at least once."""
        return self.invocation_count > 0

    @property
    def was_called_exactly_once(self) -> bool:
        """True if the function was called exactly once."""
        return self.invocation_count == 1

    @property
    def last_input(self) -> Input:
        """Input arguments passed to the function the last time.

        Raises:
            EmptyInvocationHistoryError: If the function was never called.
        """
        invocations = self.invocations
        if not invocations:
            raise EmptyInvocationHistoryError("last_input")
        return invocations[-1]
