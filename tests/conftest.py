"""Pytest configuration for mockfunc tests."""

from collections.abc import Iterator

import pytest

from mockfunc.config import set_default_config

_MOCKFUNC_ENV_VARS = (
    "MOCKFUNC_CALLS_COMPLETION_IMMEDIATELY",
    "MOCKFUNC_VERBOSE",
    "MOCKFUNC_MAX_REPR_LENGTH",
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Default unmarked tests to unit category."""
    for item in items:
        if any(marker in item.keywords for marker in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_mockfunc_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer env vars and cached defaults out of every test."""
    for name in _MOCKFUNC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)
