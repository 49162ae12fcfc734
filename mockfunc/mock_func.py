"""Mock containers standing in for a single function signature.

A stand-in double owns one MockFunc per method it replaces and delegates the
method body to it:

    class MockSearchService:
        def __init__(self) -> None:
            self.search_mock = MockFunc[tuple[str, int], list[str]]()

        def search(self, query: str, limit: int) -> list[str]:
            return self.search_mock.call_and_return((query, limit))

The mock records every input, produces the configured output and, for
callback-based signatures, dispatches the completion synchronously so that
assertions written right after the call observe its effects.
"""

from __future__ import annotations

import inspect
import linecache
import logging
import threading
import types
import typing
from collections.abc import Callable
from pathlib import Path
from typing import Any, ForwardRef, Generic, TypeVar, Union, get_args, get_origin

from mockfunc.config import MockFuncConfig, get_default_config
from mockfunc.console import format_value
from mockfunc.core.errors import EmptyInvocationHistoryError, UnconfiguredResultError
from mockfunc.core.models import (
    UNIT,
    CompletionContainer,
    ConstructionSite,
    Failure,
    Input,
    Output,
    ResultContainer,
    Success,
)
from mockfunc.core.protocols import InvocationQueries

__all__ = ["MockFunc", "MockThrowingFunc"]

logger = logging.getLogger(__name__)

# Frames from these files are skipped when locating the construction site.
_INTERNAL_FILES = frozenset(
    {
        str(Path(__file__).resolve()),
        str(Path(typing.__file__).resolve()),
    }
)

_MISSING: Any = object()


def _is_internal_frame(frame: types.FrameType) -> bool:
    """True for mockfunc/typing frames and __init__ frames of MockFunc subclasses."""
    if str(Path(frame.f_code.co_filename).resolve()) in _INTERNAL_FILES:
        return True
    return frame.f_code.co_name == "__init__" and isinstance(
        frame.f_locals.get("self"), MockFunc
    )


def _capture_construction_site(name: str | None) -> ConstructionSite:
    """Locate the first caller frame outside mockfunc, typing and subclass inits."""
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_internal_frame(frame):
            frame = frame.f_back
        if frame is None:
            return ConstructionSite(
                filename="<unknown>", lineno=0, function="<unknown>", name=name
            )
        lineno = frame.f_lineno
        code = linecache.getline(frame.f_code.co_filename, lineno).strip() or None
        return ConstructionSite(
            filename=frame.f_code.co_filename,
            lineno=lineno,
            function=frame.f_code.co_name,
            code=code,
            name=name,
        )
    finally:
        del frame


def _is_unknown_type(tp: object) -> bool:
    return tp is Any or isinstance(tp, (TypeVar, ForwardRef, str))


def _is_none_type(tp: object) -> bool:
    return tp is None or tp is type(None)


def _union_args(tp: object) -> tuple[Any, ...]:
    if get_origin(tp) in (Union, types.UnionType):
        return get_args(tp)
    return ()


def _result_variants(tp: object) -> tuple[Any, Any] | None:
    """Return the (Success[...], Failure[...]) members of a result type."""
    success = failure = None
    for member in _union_args(tp):
        origin = get_origin(member) or member
        if origin is Success:
            success = member
        elif origin is Failure:
            failure = member
    if success is None or failure is None:
        return None
    return success, failure


def _is_unit_result(tp: object) -> bool:
    """True for Result[None, E] (or a result whose payload type is unknown)."""
    variants = _result_variants(tp)
    if variants is None:
        return False
    payload = get_args(variants[0])
    return not payload or _is_none_type(payload[0]) or _is_unknown_type(payload[0])


class MockFunc(InvocationQueries[Input], Generic[Input, Output]):
    """Records calls of a mocked function and produces a configured output.

    Multi-argument signatures record their arguments as a tuple. Functions
    without arguments record UNIT, the empty tuple.

    A result must be configured (returns, returns_void, returns_nil,
    succeeds, fails or returns_using) before any output is requested;
    otherwise UnconfiguredResultError names the line that built the mock.

    Attributes:
        calls_completion_immediately: When True (default from config),
            call_with_completion triggers the completion synchronously.
            When False the completion is only stored in ``completions``.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        config: MockFuncConfig | None = None,
    ) -> None:
        """Create a mock.

        Args:
            name: Optional label used in log and error messages.
            config: Defaults for this mock. Uses get_default_config() if None.
        """
        self._config = config if config is not None else get_default_config()
        self._site = _capture_construction_site(name)
        self._lock = threading.Lock()
        self._invocations: list[Input] = []
        self._completions: list[CompletionContainer[Output]] = []
        self._did_call: Callable[[Input], Any] = lambda _input: None
        self._result: ResultContainer[Input, Output] = ResultContainer(
            self._unconfigured
        )
        self._configured = False
        self.calls_completion_immediately = self._config.calls_completion_immediately
        logger.debug("%s created", self.label)

    # -- Ledger queries ----------------------------------------------------

    @property
    def invocations(self) -> list[Input]:
        """All arguments passed to the mocked function, in call order."""
        with self._lock:
            return list(self._invocations)

    @property
    def completions(self) -> list[CompletionContainer[Output]]:
        """All completion containers recorded by call_with_completion."""
        with self._lock:
            return list(self._completions)

    @property
    def last_output(self) -> Output:
        """The configured result applied to the last input.

        Raises:
            EmptyInvocationHistoryError: If the function was never called.
            UnconfiguredResultError: If no result was configured.
        """
        with self._lock:
            if not self._invocations:
                raise EmptyInvocationHistoryError("last_output")
            last_input = self._invocations[-1]
        return self._output_for(last_input)

    @property
    def last_completion(self) -> CompletionContainer[Output]:
        """The completion container recorded by the latest completion-style call.

        Raises:
            EmptyInvocationHistoryError: If no completion was recorded.
        """
        with self._lock:
            if not self._completions:
                raise EmptyInvocationHistoryError("last_completion")
            return self._completions[-1]

    @property
    def site(self) -> ConstructionSite:
        """Where this mock was instantiated."""
        return self._site

    @property
    def label(self) -> str:
        if self._site.name:
            return f"MockFunc '{self._site.name}'"
        return f"MockFunc@{Path(self._site.filename).name}:{self._site.lineno}"

    # -- Calls -------------------------------------------------------------

    def call(self, input: Input = UNIT) -> None:  # type: ignore[assignment]
        """Record an invocation and notify the when_called observer.

        Does not compute an output. Stand-ins for functions whose result is
        irrelevant may call this directly.

        Args:
            input: Arguments of the mocked function. Omit for functions
                without arguments.
        """
        with self._lock:
            self._invocations.append(input)
            count = len(self._invocations)
            observer = self._did_call
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s called: input=%s count=%d", self.label, self._format(input), count
            )
        observer(input)

    def call_and_return(self, input: Input = UNIT) -> Output:  # type: ignore[assignment]
        """Record an invocation, then return the configured output for it.

        Normally called from a stand-in's method body:

            def remove_domain(self, name: str) -> None:
                self.remove_domain_mock.call_and_return(name)

        Raises:
            UnconfiguredResultError: If no result was configured.
        """
        self.call(input)
        return self._output_for(input)

    def call_with_completion(
        self, input: Input, completion: Callable[[Output], Any]
    ) -> None:
        """Record a call of a callback-based function.

        Steps:
        1. Append input to the invocations and notify the observer.
        2. Wrap completion in a CompletionContainer and append it to completions.
        3. If calls_completion_immediately is True, call the completion with
           the output before returning. Otherwise leave it for the test to
           trigger through last_completion.

        Raises:
            UnconfiguredResultError: If dispatching immediately and no result
                was configured.
        """
        self.call(input)
        container = CompletionContainer(completion)
        with self._lock:
            self._completions.append(container)
            immediate = self.calls_completion_immediately
        if not immediate:
            logger.debug("%s deferred completion", self.label)
            return
        output = self._output_for(input)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s dispatching completion: output=%s",
                self.label,
                self._format(output),
            )
        container(output)

    def when_called(self, closure: Callable[[Input], Any]) -> None:
        """Get notified with the input whenever the mocked function is called.

        Replaces any previous observer. Recorded invocations are kept.
        """
        with self._lock:
            self._did_call = closure

    # -- Configuration -----------------------------------------------------

    def returns_using(self, closure: Callable[[Input], Output]) -> None:
        """Compute the output from the input with closure."""
        self._set_result(closure, "returns_using")

    def returns(self, value: Output) -> None:
        """Always return value.

            search_mock.returns(SearchResult(id="1"))
        """
        self._set_result(lambda _input: value, "returns", value)

    def returns_void(self) -> None:
        """Configure a function returning None.

        Functions without a return value still need a result, otherwise the
        mock is not considered configured.
        """
        self._require_output(_is_none_type, "returns_void", "None")
        self._set_result(lambda _input: None, "returns_void")  # type: ignore[arg-type, return-value]

    def returns_nil(self) -> None:
        """Always return None from a function with an optional result."""
        self._require_output(
            lambda tp: any(_is_none_type(arg) for arg in _union_args(tp)),
            "returns_nil",
            "an optional type (T | None)",
        )
        self._set_result(lambda _input: None, "returns_nil")  # type: ignore[arg-type, return-value]

    def succeeds(self, value: Any = _MISSING) -> None:  # noqa: ANN401
        """Always return Success(value) from a function returning a Result.

        Without a value, returns Success(None) for Result[None, E].
        """
        if value is _MISSING:
            self._require_output(_is_unit_result, "succeeds", "Result[None, E]")
            success = Success(None)
        else:
            self._require_output(
                lambda tp: _result_variants(tp) is not None, "succeeds", "Result[T, E]"
            )
            success = Success(value)
        self._set_result(lambda _input: success, "succeeds", success)  # type: ignore[arg-type, return-value]

    def fails(self, error: Any) -> None:  # noqa: ANN401
        """Always return Failure(error) from a function returning a Result.

            search_mock.fails(SearchError.TIMEOUT)
        """
        self._require_output(
            lambda tp: _result_variants(tp) is not None, "fails", "Result[T, E]"
        )
        failure = Failure(error)
        self._set_result(lambda _input: failure, "fails", failure)  # type: ignore[arg-type, return-value]

    # -- Internals ---------------------------------------------------------

    def _unconfigured(self, _input: Input) -> Output:
        raise UnconfiguredResultError(self._site)

    def _output_for(self, input: Input) -> Output:
        with self._lock:
            result = self._result
        return result(input)

    def _set_result(
        self,
        closure: Callable[[Input], Output],
        operation: str,
        value: Any = _MISSING,  # noqa: ANN401
    ) -> None:
        with self._lock:
            self._result = ResultContainer(closure)
            self._configured = True
        if logger.isEnabledFor(logging.DEBUG):
            shown = "" if value is _MISSING else f" {self._format(value)}"
            logger.debug("%s configured: %s%s", self.label, operation, shown)

    def _declared_output(self) -> Any:  # noqa: ANN401
        """Output type from subscription (MockFunc[I, O]() or a subclass base).

        Returns Any when the mock was not parameterised.
        """
        candidates = [getattr(self, "__orig_class__", None)]
        for cls in type(self).__mro__:
            candidates.extend(getattr(cls, "__orig_bases__", ()))
        for candidate in candidates:
            origin = get_origin(candidate)
            if not (isinstance(origin, type) and issubclass(origin, MockFunc)):
                continue
            args = get_args(candidate)
            if len(args) == 2:
                return args[1]
        return Any

    def _require_output(
        self, check: Callable[[Any], bool], operation: str, expected: str
    ) -> None:
        output_type = self._declared_output()
        if _is_unknown_type(output_type) or check(output_type):
            return
        raise TypeError(
            f"{operation}() requires Output to be {expected}, "
            f"but {self.label} declares Output={output_type!r}"
        )

    def _format(self, value: Any) -> str:  # noqa: ANN401
        return format_value(
            value, self._config.max_repr_length, verbose=self._config.verbose
        )

    def __repr__(self) -> str:
        with self._lock:
            count = len(self._invocations)
            configured = self._configured
        return (
            f"<{type(self).__name__} {self._site.describe()} "
            f"invocations={count} configured={configured}>"
        )


class MockThrowingFunc(MockFunc[Input, Output]):
    """MockFunc for signatures that may raise.

    In addition to the MockFunc configuration, throws(error) makes every
    output computation raise error. The input is recorded before the error
    propagates.
    """

    def throws(self, error: BaseException) -> None:
        """Raise error whenever the output is requested.

            fetch_mock.throws(ConnectionError("offline"))
        """

        def _raise(_input: Input) -> Output:
            raise error.with_traceback(None)

        self._set_result(_raise, "throws", error)
