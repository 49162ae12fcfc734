"""Unit tests for MockThrowingFunc in mockfunc/mock_func.py."""

from __future__ import annotations

import traceback

import pytest

from mockfunc import MockFunc, MockThrowingFunc, UnconfiguredResultError


class FetchError(Exception):
    pass


def test_is_a_mock_func() -> None:
    assert isinstance(MockThrowingFunc[str, bytes](), MockFunc)


def test_throws_raises_configured_error() -> None:
    error = FetchError("offline")
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(error)

    with pytest.raises(FetchError) as excinfo:
        mock.call_and_return("https://x")

    assert excinfo.value is error


def test_input_recorded_before_error() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(FetchError("offline"))

    with pytest.raises(FetchError):
        mock.call_and_return("https://x")

    assert mock.invocations == ["https://x"]
    assert mock.was_called_exactly_once is True


def test_last_output_raises() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(FetchError("offline"))
    mock.call("https://x")

    with pytest.raises(FetchError):
        _ = mock.last_output


def test_returns_replaces_throws() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(FetchError("offline"))
    mock.returns(b"data")

    assert mock.call_and_return("https://x") == b"data"


def test_throws_replaces_returns() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.returns(b"data")
    mock.throws(FetchError("offline"))

    with pytest.raises(FetchError):
        mock.call_and_return("https://x")


def test_immediate_completion_propagates_error() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(FetchError("offline"))
    received: list[bytes] = []

    with pytest.raises(FetchError):
        mock.call_with_completion("https://x", received.append)

    assert received == []
    assert len(mock.completions) == 1


def test_unconfigured_still_raises_unconfigured() -> None:
    mock = MockThrowingFunc[str, bytes]()
    with pytest.raises(UnconfiguredResultError) as excinfo:
        mock.call_and_return("https://x")
    assert excinfo.value.site.function == "test_unconfigured_still_raises_unconfigured"


def test_repeated_calls_do_not_grow_traceback() -> None:
    mock = MockThrowingFunc[str, bytes]()
    mock.throws(FetchError("offline"))
    depths: list[int] = []

    for _ in range(3):
        with pytest.raises(FetchError) as excinfo:
            mock.call_and_return("https://x")
        depths.append(len(traceback.extract_tb(excinfo.value.__traceback__)))

    assert depths[0] == depths[1] == depths[2]
