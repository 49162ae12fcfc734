"""Value types shared by the mock containers.

Types:
- ResultContainer: Strategy mapping a mock's input to its output
- CompletionContainer: Wrapper forwarding an output to a completion callback
- ConstructionSite: Where a mock was instantiated, for error messages
- Success / Failure / Result: Two-variant result type for mocked signatures
- UNIT: The input recorded for functions without arguments
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

Input = TypeVar("Input")
Output = TypeVar("Output")
T = TypeVar("T")
E = TypeVar("E")

UNIT: tuple[()] = ()


@dataclass(frozen=True)
class ResultContainer(Generic[Input, Output]):
    """Produces the mock's output for a given input."""

    closure: Callable[[Input], Output]

    def __call__(self, input: Input) -> Output:
        return self.closure(input)


@dataclass(frozen=True)
class CompletionContainer(Generic[Output]):
    """Holds a caller-supplied completion callback.

    Calling the container forwards a single output value to the callback.
    """

    completion: Callable[[Output], Any]

    def __call__(self, output: Output) -> None:
        self.completion(output)


@dataclass(frozen=True)
class ConstructionSite:
    """Source location of the statement that instantiated a mock.

    Attributes:
        filename: File containing the instantiation.
        lineno: Line number of the instantiation.
        function: Enclosing function (or class body / <module>).
        code: Source text of the line, if available.
        name: Optional label passed explicitly to the mock.
    """

    filename: str
    lineno: int
    function: str
    code: str | None = None
    name: str | None = None

    def describe(self) -> str:
        """Human readable location used in error messages."""
        label = f"'{self.name}' " if self.name else ""
        location = f"{label}instantiated at line {self.lineno} of {self.function} ({self.filename})"
        if self.code:
            location += f": {self.code}"
        return location


@dataclass(frozen=True)
class Success(Generic[T]):
    """Success variant of a mocked result."""

    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failure variant of a mocked result."""

    error: E


Result = Union[Success[T], Failure[E]]
