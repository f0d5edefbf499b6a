"""
Tests for option resolution — inclusion, exclusion, and forwarded configs.
"""

from __future__ import annotations

import pytest

from hardhat.core.errors import ConfigError, DuplicateOptionError, InvalidOptionError
from hardhat.pipeline.names import DEFAULT_HANDLERS, HANDLER_ORDER, HandlerName
from hardhat.pipeline.options import HardhatOptions
from hardhat.pipeline.resolver import coerce_options, resolve_options, resolve_setting


def _names(resolved) -> list[HandlerName]:
    return [entry.name for entry in resolved]


class TestDefaults:
    def test_empty_mapping_yields_default_set_in_order(self):
        resolved = resolve_options({})
        assert _names(resolved) == [n for n in HANDLER_ORDER if n in DEFAULT_HANDLERS]
        assert len(resolved) == len(DEFAULT_HANDLERS) == 7

    def test_none_same_as_empty(self):
        assert resolve_options(None) == resolve_options({})

    def test_default_configs_are_empty(self):
        for entry in resolve_options():
            assert entry.config == {}

    def test_default_configs_are_distinct_objects(self):
        first, second = resolve_options()[:2]
        assert first.config is not second.config


class TestExplicitSettings:
    def test_false_removes_default_handler(self):
        resolved = resolve_options({"frameguard": False})
        assert HandlerName.FRAMEGUARD not in _names(resolved)
        assert len(resolved) == 6

    def test_false_on_non_default_is_still_absent(self):
        resolved = resolve_options({"hpkp": False})
        assert HandlerName.HPKP not in _names(resolved)

    def test_true_adds_non_default_handler_with_empty_config(self):
        resolved = resolve_options({"referrer_policy": True})
        entry = next(e for e in resolved if e.name is HandlerName.REFERRER_POLICY)
        assert entry.config == {}

    def test_true_on_default_handler_keeps_it(self):
        resolved = resolve_options({"hsts": True})
        assert HandlerName.HSTS in _names(resolved)

    def test_mapping_forwarded_unchanged(self):
        config = {"a": 1}
        resolved = resolve_options({"expect_ct": config})
        entry = next(e for e in resolved if e.name is HandlerName.EXPECT_CT)
        assert entry.config is config
        assert entry.config == {"a": 1}

    def test_mapping_on_default_handler_not_merged(self):
        config = {"max_age": 10}
        resolved = resolve_options({"hsts": config})
        entry = next(e for e in resolved if e.name is HandlerName.HSTS)
        assert entry.config == {"max_age": 10}

    def test_empty_mapping_still_enables(self):
        resolved = resolve_options({"no_cache": {}})
        assert HandlerName.NO_CACHE in _names(resolved)

    def test_explicit_none_is_omitted(self):
        resolved = resolve_options({"frameguard": None, "hpkp": None})
        assert HandlerName.FRAMEGUARD in _names(resolved)
        assert HandlerName.HPKP not in _names(resolved)


class TestOrdering:
    def test_order_invariant_under_key_permutation(self):
        forward = {
            "content_security_policy": {"directives": {"default_src": ["'self'"]}},
            "referrer_policy": True,
            "frameguard": False,
            "no_cache": True,
        }
        backward = dict(reversed(list(forward.items())))
        assert _names(resolve_options(forward)) == _names(resolve_options(backward))

    def test_all_enabled_matches_registration_order(self):
        resolved = resolve_options({name.value: True for name in reversed(HANDLER_ORDER)})
        assert _names(resolved) == list(HANDLER_ORDER)


class TestKeys:
    def test_camel_case_aliases(self):
        resolved = resolve_options({"dnsPrefetchControl": False, "referrerPolicy": True})
        names = _names(resolved)
        assert HandlerName.DNS_PREFETCH_CONTROL not in names
        assert HandlerName.REFERRER_POLICY in names

    def test_enum_keys(self):
        resolved = resolve_options({HandlerName.NO_SNIFF: False})
        assert HandlerName.NO_SNIFF not in _names(resolved)

    def test_unknown_keys_ignored(self):
        assert resolve_options({"not_a_handler": True, 42: False}) == resolve_options({})

    def test_name_and_alias_together_rejected(self):
        with pytest.raises(DuplicateOptionError) as exc_info:
            resolve_options({"dns_prefetch_control": False, "dnsPrefetchControl": {"allow": True}})
        assert exc_info.value.handler == "dns_prefetch_control"
        assert exc_info.value.keys == ["dns_prefetch_control", "dnsPrefetchControl"]

    def test_duplicate_rejected_in_either_order(self):
        forward = {"dns_prefetch_control": False, "dnsPrefetchControl": {"allow": True}}
        backward = dict(reversed(list(forward.items())))
        for options in (forward, backward):
            with pytest.raises(DuplicateOptionError):
                resolve_options(options)

    def test_enum_key_and_alias_rejected(self):
        with pytest.raises(DuplicateOptionError, match="no_sniff"):
            resolve_options({HandlerName.NO_SNIFF: True, "noSniff": False})

    def test_dataclass_options(self):
        opts = HardhatOptions(hsts=False, expect_ct={"max_age": 5})
        names = _names(resolve_options(opts))
        assert HandlerName.HSTS not in names
        assert HandlerName.EXPECT_CT in names


class TestRejectedShapes:
    @pytest.mark.parametrize("value", [0, 1, 3.5, "yes", ["a"], ("b",)])
    def test_unsupported_values_raise(self, value):
        with pytest.raises(InvalidOptionError) as exc_info:
            resolve_options({"frameguard": value})
        assert exc_info.value.handler == "frameguard"
        assert isinstance(exc_info.value, ConfigError)

    def test_resolve_setting_rejects_int(self):
        with pytest.raises(InvalidOptionError):
            resolve_setting(HandlerName.HSTS, 1)  # type: ignore[arg-type]

    def test_non_mapping_options_rejected(self):
        with pytest.raises(InvalidOptionError):
            coerce_options(["frameguard"])  # type: ignore[arg-type]
