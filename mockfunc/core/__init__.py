"""Core value types, errors and protocols for mock containers."""

from mockfunc.core.errors import (
    EmptyInvocationHistoryError,
    MockFuncError,
    UnconfiguredResultError,
)
from mockfunc.core.models import (
    UNIT,
    CompletionContainer,
    ConstructionSite,
    Failure,
    Result,
    ResultContainer,
    Success,
)
from mockfunc.core.protocols import InvocationQueries, MockFuncInvoking

__all__ = [
    "UNIT",
    "CompletionContainer",
    "ConstructionSite",
    "EmptyInvocationHistoryError",
    "Failure",
    "InvocationQueries",
    "MockFuncError",
    "MockFuncInvoking",
    "Result",
    "ResultContainer",
    "Success",
    "UnconfiguredResultError",
]
