"""Errors raised when a mock is misused by the test author.

Both errors derive from AssertionError so that a misused mock fails the
running test instead of being handled by the code under test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockfunc.core.models import ConstructionSite

__all__ = [
    "EmptyInvocationHistoryError",
    "MockFuncError",
    "UnconfiguredResultError",
]


class MockFuncError(AssertionError):
    """Base class for mock misuse errors."""


class UnconfiguredResultError(MockFuncError):
    """Raised when output is requested before a result was configured.

    Example:
        mock = MockFunc[str, int]()
        mock.call_and_return("x")
        # UnconfiguredResultError: You must provide a result handler before
        # using MockFunc instantiated at line 12 of test_search
        # (tests/test_search.py): mock = MockFunc[str, int]()
    """

    def __init__(self, site: ConstructionSite) -> None:
        self.site = site
        super().__init__(
            f"You must provide a result handler before using MockFunc {site.describe()}"
        )


class EmptyInvocationHistoryError(MockFuncError, IndexError):
    """Raised when a ledger query is read before the mock was called."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(
            f"{query} is not available: the mock has no recorded invocations"
        )
