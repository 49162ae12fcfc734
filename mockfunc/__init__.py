"""mockfunc: Recording mock containers for hand-written test doubles."""

from mockfunc.config import (
    ConfigurationError,
    MockFuncConfig,
    get_default_config,
    set_default_config,
)
from mockfunc.core import (
    UNIT,
    CompletionContainer,
    ConstructionSite,
    EmptyInvocationHistoryError,
    Failure,
    InvocationQueries,
    MockFuncError,
    MockFuncInvoking,
    Result,
    ResultContainer,
    Success,
    UnconfiguredResultError,
)
from mockfunc.mock_func import MockFunc, MockThrowingFunc

__version__ = "0.1.0"
__all__ = [
    "UNIT",
    "CompletionContainer",
    "ConfigurationError",
    "ConstructionSite",
    "EmptyInvocationHistoryError",
    "Failure",
    "InvocationQueries",
    "MockFunc",
    "MockFuncConfig",
    "MockFuncError",
    "MockFuncInvoking",
    "MockThrowingFunc",
    "Result",
    "ResultContainer",
    "Success",
    "UnconfiguredResultError",
    "__version__",
    "get_default_config",
    "set_default_config",
]
