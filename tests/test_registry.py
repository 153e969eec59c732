"""Unit tests for registry assembly."""

import json
import logging

import pytest

from sdkmodels.constants import CATEGORIES
from sdkmodels.models import ModelTypeRecord
from sdkmodels.registry import (
    RegistryCollisionError,
    build_registry,
    build_registry_from_texts,
    dedupe_records,
    provider_prefix,
    unique_type_name,
)
from fixtures.declaration_fixtures import FOO_BAR_DTS


def _record(alias_name, *models, category="chat"):
    return ModelTypeRecord(alias_name=alias_name, models=tuple(models), category=category)


class TestProviderPrefix:
    """Test provider-prefixed type names."""

    @pytest.mark.parametrize("provider, expected", [
        ("openai", "Openai"),
        ("foo-bar", "FooBar"),
        ("google-vertex", "GoogleVertex"),
        ("@friendliai/ai-provider", "FriendliaiAiProvider"),
        ("@openrouter/ai-sdk-provider", "OpenrouterAiSdkProvider"),
    ])
    def test_prefix(self, provider, expected):
        """Test splitting on '-', '@' and '/'."""
        assert provider_prefix(provider) == expected

    def test_unique_type_name(self):
        """Test the provider prefix plus alias name."""
        assert unique_type_name("foo-bar", "FooChatModelId") == "FooBarFooChatModelId"


class TestDedupeRecords:
    """Test first-occurrence deduplication."""

    def test_first_occurrence_wins(self):
        """Test that a later record with the same alias is dropped."""
        records = [_record("A", "1"), _record("B", "2"), _record("A", "3")]

        unique = dedupe_records(records)

        assert [r.alias_name for r in unique] == ["A", "B"]
        assert unique[0].models == ("1",)

    def test_empty(self):
        """Test an empty input."""
        assert dedupe_records([]) == []


class TestBuildRegistry:
    """Test nested and flat registry views."""

    def test_end_to_end_scenario(self):
        """Test the foo-bar provider scenario."""
        registry = build_registry_from_texts({"foo-bar": FOO_BAR_DTS})

        assert registry.nested == {"foo-bar": {"chat": {"FooBarFooChatModelId": ("a-1", "a-2")}}}
        assert [entry.to_dict() for entry in registry.flat] == [
            {"provider": "foo-bar", "model": "a-1", "category": "chat", "value": "foo-bar:a-1"},
            {"provider": "foo-bar", "model": "a-2", "category": "chat", "value": "foo-bar:a-2"},
        ]
        assert registry.unique_type_names("foo-bar") == ["FooBarFooChatModelId"]

    def test_dedup_keeps_first_literals(self):
        """Test two declarations of one alias with different literals."""
        text = "type FooModelId = 'first-a' | 'first-b';\ntype FooModelId = 'second';"

        registry = build_registry_from_texts({"foo": text})

        assert registry.nested["foo"]["chat"] == {"FooFooModelId": ("first-a", "first-b")}
        assert [e.model for e in registry.flat] == ["first-a", "first-b"]

    def test_dedup_across_patterns(self):
        """Test that an alias found by two patterns is recorded once."""
        registry = build_registry_from_texts({"bar": "type BarChatModel = 'c-1';"})

        assert registry.type_count == 1
        assert registry.model_count == 1

    def test_exclusion(self):
        """Test that OpenAIResponsesModelId never reaches the registry."""
        text = "type OpenAIResponsesModelId = 'o1' | 'gpt-4o';\ntype OpenAIChatModelId = 'gpt-4o';"

        registry = build_registry_from_texts({"openai": text})

        assert registry.unique_type_names("openai") == ["OpenaiOpenAIChatModelId"]
        assert "responses" not in registry.nested["openai"]

    def test_flat_nested_consistency(self, registry):
        """Test that both views hold the same number of models."""
        nested_total = sum(
            len(models)
            for categories in registry.nested.values()
            for types in categories.values()
            for models in types.values()
        )

        assert len(registry.flat) == nested_total == 19
        assert {e.provider for e in registry.flat} == set(registry.nested)
        assert {e.category for e in registry.flat} == {
            c for categories in registry.nested.values() for c in categories
        }

    def test_value_format(self, registry):
        """Test that every value is provider:model."""
        for entry in registry.flat:
            assert entry.value == f"{entry.provider}:{entry.model}"

    def test_categories_known(self, registry):
        """Test that every category is part of the taxonomy."""
        assert {e.category for e in registry.flat} <= set(CATEGORIES)

    def test_canonical_order(self, registry):
        """Test provider, record and literal ordering of the flat list."""
        providers = list(dict.fromkeys(e.provider for e in registry.flat))

        assert providers == ["anthropic", "openai", "ollama-ai-provider", "@friendliai/ai-provider"]
        openai_models = [e.model for e in registry.flat if e.provider == "openai"]
        assert openai_models[:4] == ["o1", "gpt-4o", "gpt-4o-mini", "gpt-3.5-turbo-instruct"]

    def test_category_order_first_appearance(self, registry):
        """Test that categories follow the first record of each category."""
        assert list(registry.nested["openai"]) == [
            "chat", "completion", "embedding", "image", "transcription", "speech",
        ]

    def test_determinism(self, provider_texts):
        """Test that two builds produce identical output."""
        first = build_registry_from_texts(provider_texts)
        second = build_registry_from_texts(provider_texts)

        assert first.flat == second.flat
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_empty_provider_omitted(self):
        """Test that a provider without records is left out."""
        registry = build_registry({"empty": [], "foo": [_record("FooModelId", "a")]})

        assert list(registry.nested) == ["foo"]
        assert list(registry.providers) == ["foo"]

    def test_no_empty_categories(self, registry):
        """Test that no provider/category pair is an empty placeholder."""
        for categories in registry.nested.values():
            for types in categories.values():
                assert types

    def test_read_only_views(self, registry):
        """Test that the nested mapping cannot be modified."""
        with pytest.raises(TypeError):
            registry.nested["new"] = {}
        with pytest.raises(TypeError):
            registry.nested["openai"]["chat"]["X"] = ("x",)

    def test_to_dict_is_copy(self, registry):
        """Test that to_dict returns mutable copies detached from the registry."""
        data = registry.to_dict()
        data["models"].clear()
        data["registry"]["openai"]["chat"]["OpenaiOpenAIChatModelId"].append("zzz")

        assert registry.model_count == 19
        assert "zzz" not in registry.nested["openai"]["chat"]["OpenaiOpenAIChatModelId"]

    def test_counts(self, registry):
        """Test type and model totals."""
        assert registry.type_count == 10
        assert registry.model_count == 19


class TestCollisions:
    """Test cross-provider unique type name collisions."""

    def test_collision_raises_by_default(self):
        """Test that 'foo-bar' and 'foo/bar' collide on the same alias."""
        with pytest.raises(RegistryCollisionError) as exc_info:
            build_registry({
                "foo-bar": [_record("XModelId", "a")],
                "foo/bar": [_record("XModelId", "b")],
            })

        assert exc_info.value.type_name == "FooBarXModelId"
        assert exc_info.value.first_provider == "foo-bar"
        assert exc_info.value.second_provider == "foo/bar"

    def test_collision_warn(self, caplog):
        """Test that the warn policy keeps both providers."""
        with caplog.at_level(logging.WARNING):
            registry = build_registry(
                {
                    "foo-bar": [_record("XModelId", "a")],
                    "foo/bar": [_record("XModelId", "b")],
                },
                on_collision="warn",
            )

        assert registry.collisions == ("FooBarXModelId",)
        assert list(registry.nested) == ["foo-bar", "foo/bar"]
        assert registry.model_count == 2
        assert "collides" in caplog.text

    def test_no_collision_for_different_aliases(self):
        """Test that distinct aliases never collide."""
        registry = build_registry({
            "foo-bar": [_record("XModelId", "a")],
            "foo/bar": [_record("YModelId", "b")],
        })

        assert registry.collisions == ()

    def test_unknown_policy(self):
        """Test that an unknown policy is rejected."""
        with pytest.raises(ValueError):
            build_registry({}, on_collision="ignore")
