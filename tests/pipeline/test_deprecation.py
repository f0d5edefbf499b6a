"""
Tests for deprecated factories and diagnostic sinks.
"""

from __future__ import annotations

import warnings

import pytest

from hardhat.pipeline.deprecation import (
    DeprecatedFactory,
    OncePerPipelineSink,
    deprecate,
    warn_deprecated,
)
from hardhat.pipeline.factory import create_pipeline
from hardhat.pipeline.names import HandlerName
from hardhat.pipeline.registry import (
    FEATURE_POLICY_DEPRECATION,
    HPKP_DEPRECATION,
    NO_CACHE_DEPRECATION,
    REGISTRY,
)


def _handler(request, response, next):
    next()


class TestDeprecate:
    def test_returns_same_handler(self):
        legacy = deprecate(lambda config: _handler, "legacy is deprecated")
        assert legacy({}, sink=lambda message: None) is _handler

    def test_emits_before_each_invocation(self):
        messages: list[str] = []
        legacy = deprecate(lambda config: _handler, "legacy is deprecated")
        legacy({}, sink=messages.append)
        legacy({}, sink=messages.append)
        assert messages == ["legacy is deprecated", "legacy is deprecated"]

    def test_config_forwarded(self):
        seen = []

        def factory(config):
            seen.append(config)
            return _handler

        config = {"x": 1}
        deprecate(factory, "msg")(config, sink=lambda m: None)
        assert seen[0] is config

    def test_factory_error_unchanged(self):
        def factory(config):
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            deprecate(factory, "msg")({}, sink=lambda m: None)

    def test_failing_sink_does_not_change_result(self):
        def sink(message):
            raise RuntimeError("sink down")

        assert deprecate(lambda config: _handler, "msg")({}, sink=sink) is _handler

    def test_keeps_factory_name(self):
        def my_factory(config):
            return _handler

        wrapped = deprecate(my_factory, "msg")
        assert wrapped.__name__ == "my_factory"
        assert "my_factory" in repr(wrapped)


class TestDefaultSink:
    def test_warns(self):
        with pytest.warns(DeprecationWarning, match="going away"):
            warn_deprecated("going away")

    def test_silenced_by_settings(self, monkeypatch):
        monkeypatch.setenv("HARDHAT_EMIT_DEPRECATIONS", "false")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            warn_deprecated("going away")

    def test_standalone_call_uses_default_sink(self):
        with pytest.warns(DeprecationWarning):
            deprecate(lambda config: _handler, "standalone")({})


class TestOncePerPipelineSink:
    def test_dedupes_messages(self):
        messages: list[str] = []
        sink = OncePerPipelineSink(messages.append)
        sink("a")
        sink("a")
        sink("b")
        assert messages == ["a", "b"]

    def test_instances_are_independent(self):
        messages: list[str] = []
        OncePerPipelineSink(messages.append)("a")
        OncePerPipelineSink(messages.append)("a")
        assert messages == ["a", "a"]


class TestRegisteredDeprecations:
    @pytest.mark.parametrize(
        "name, message",
        [
            (HandlerName.FEATURE_POLICY, FEATURE_POLICY_DEPRECATION),
            (HandlerName.HPKP, HPKP_DEPRECATION),
            (HandlerName.NO_CACHE, NO_CACHE_DEPRECATION),
        ],
    )
    def test_marked_deprecated(self, name, message):
        factory = REGISTRY[name]
        assert isinstance(factory, DeprecatedFactory)
        assert factory.message == message

    def test_others_not_deprecated(self):
        deprecated = {HandlerName.FEATURE_POLICY, HandlerName.HPKP, HandlerName.NO_CACHE}
        for name, factory in REGISTRY.items():
            if name not in deprecated:
                assert not isinstance(factory, DeprecatedFactory)

    def test_emitted_per_construction_not_per_request(
        self, request_double, make_response, recording_next
    ):
        messages: list[str] = []
        pipeline = create_pipeline({"no_cache": True}, sink=messages.append)
        assert messages == [NO_CACHE_DEPRECATION]

        for _ in range(5):
            pipeline(request_double, make_response(), recording_next)
        assert messages == [NO_CACHE_DEPRECATION]

        create_pipeline({"no_cache": True}, sink=messages.append)
        assert messages == [NO_CACHE_DEPRECATION, NO_CACHE_DEPRECATION]

    def test_not_emitted_when_disabled(self):
        messages: list[str] = []
        create_pipeline({"no_cache": False, "hpkp": False}, sink=messages.append)
        assert messages == []

    def test_deprecated_handler_still_works(self, request_double, response_double, recording_next):
        pipeline = create_pipeline(
            {"no_cache": True, "hsts": False}, sink=lambda message: None
        )
        pipeline(request_double, response_double, recording_next)
        assert response_double.headers["Cache-Control"] == (
            "no-store, no-cache, must-revalidate, proxy-revalidate"
        )
        assert recording_next.calls == [()]
