"""
Shared test fixtures for metadata-filter tests.

Filter functions used across the suite are defined here: a pass-through
``dummy_fn`` and ``SpyFilterFunction``, a callable that records every
input it receives so tests can assert how often (and in which order)
filter functions were called.
"""

from __future__ import annotations

import pytest


class SpyFilterFunction:
    """Filter function that records its calls.

    Optionally appends *suffix* to the text, which makes the order of
    calls visible in the result.
    """

    def __init__(self, suffix: str = "", log: list | None = None) -> None:
        self.suffix = suffix
        self.calls: list[str] = []
        self._log = log

    def __call__(self, text: str) -> str:
        self.calls.append(text)
        if self._log is not None:
            self._log.append(self)
        return f"{text}{self.suffix}"

    @property
    def called(self) -> bool:
        return bool(self.calls)


def _dummy_fn(text: str) -> str:
    return text


@pytest.fixture
def dummy_fn():
    """A filter function that returns its input unchanged."""
    return _dummy_fn


@pytest.fixture
def call_log() -> list:
    """Shared list that spies append themselves to, in call order."""
    return []


@pytest.fixture
def make_spy(call_log):
    """Factory fixture for ``SpyFilterFunction`` instances sharing ``call_log``."""

    def _make(suffix: str = "") -> SpyFilterFunction:
        return SpyFilterFunction(suffix, log=call_log)

    return _make


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs several modules together)",
    )
