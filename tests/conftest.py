"""
Shared pytest fixtures for hardhat tests.

This module provides:
- Minimal request/response doubles that satisfy the handler contract
- A recording continuation
- A spy registry whose factories record how they were invoked

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(request_double, response_double, recording_next):
        ...
"""

import sys
from collections.abc import Generator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

# Ensure hardhat package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hardhat.core.settings import get_settings
from hardhat.pipeline.names import HandlerName


# =============================================================================
# Transport doubles
# =============================================================================


@dataclass
class FakeRequest:
    """Request double; header keys are lower-case like real ASGI headers."""

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class FakeResponse:
    """Response double with a plain header dict and a handler trail."""

    headers: dict[str, str] = field(default_factory=dict)
    trail: list[str] = field(default_factory=list)


class RecordingNext:
    """Outer continuation that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def called_once(self) -> bool:
        return len(self.calls) == 1


@pytest.fixture
def request_double() -> FakeRequest:
    return FakeRequest()


@pytest.fixture
def make_request():
    """Factory for requests with specific headers."""

    def _make(method: str = "GET", **headers: str) -> FakeRequest:
        return FakeRequest(
            method=method,
            headers={key.replace("_", "-").lower(): value for key, value in headers.items()},
        )

    return _make


@pytest.fixture
def make_response():
    """Factory for fresh responses, optionally with pre-set headers."""

    def _make(**headers: str) -> FakeResponse:
        return FakeResponse(headers={key.replace("_", "-"): value for key, value in headers.items()})

    return _make


@pytest.fixture
def response_double() -> FakeResponse:
    return FakeResponse()


@pytest.fixture
def recording_next() -> RecordingNext:
    return RecordingNext()


# =============================================================================
# Spy registry
# =============================================================================


class SpyRegistry(dict):
    """Registry whose factories record their configs and tag the response trail."""

    def __init__(self) -> None:
        super().__init__()
        self.invocations: list[tuple[HandlerName, Any]] = []
        for name in HandlerName:
            self[name] = self._make_factory(name)

    def _make_factory(self, name: HandlerName):
        def factory(config):
            self.invocations.append((name, config))

            def handler(request, response, next):
                response.trail.append(name.value)
                next()

            return handler

        factory.__name__ = name.value
        return factory

    def configs_for(self, name: HandlerName) -> list[Any]:
        return [config for invoked, config in self.invocations if invoked is name]


@pytest.fixture
def spy_registry() -> SpyRegistry:
    return SpyRegistry()


# =============================================================================
# Settings isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
