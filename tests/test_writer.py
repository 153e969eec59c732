"""Unit tests for RegistryWriter class."""

import io
import json

import pytest

from sdkmodels.models import ModelTypeRecord
from sdkmodels.registry import build_registry, build_registry_from_texts
from sdkmodels.writer import RegistryWriter
from fixtures.declaration_fixtures import FOO_BAR_DTS


def _render(registry, output_format="typescript"):
    stream = io.StringIO()
    writer = RegistryWriter(stream, output_format=output_format)
    writer.write_registry(registry)
    return stream.getvalue(), writer


class TestTypeScriptOutput:
    """Test the generated TypeScript module."""

    def test_end_to_end_alias(self):
        """Test the open union emitted for one alias."""
        output, _ = _render(build_registry_from_texts({"foo-bar": FOO_BAR_DTS}))

        assert "// FOO-BAR Models\n" in output
        assert "export type FooBarFooChatModelId = 'a-1' | 'a-2' | (string & {});\n" in output

    def test_nested_registry_block(self):
        """Test the AI_SDK_MODELS constant."""
        output, _ = _render(build_registry_from_texts({"foo-bar": FOO_BAR_DTS}))

        expected = (
            "export const AI_SDK_MODELS = {\n"
            "  'foo-bar': {\n"
            "    chat: {\n"
            "      FooBarFooChatModelId: ['a-1', 'a-2'],\n"
            "    },\n"
            "  },\n"
            "} as const;\n"
        )
        assert expected in output

    def test_flat_list_block(self):
        """Test the ALL_MODELS constant."""
        output, _ = _render(build_registry_from_texts({"foo-bar": FOO_BAR_DTS}))

        assert (
            "  { provider: 'foo-bar', model: 'a-1', category: 'chat', value: 'foo-bar:a-1' },\n"
            "  { provider: 'foo-bar', model: 'a-2', category: 'chat', value: 'foo-bar:a-2' },\n"
            "] as const;"
        ) in output

    def test_identifier_keys_unquoted(self, registry):
        """Test that plain provider ids are used as bare keys."""
        output, _ = _render(registry)

        assert "\n  openai: {\n" in output
        assert "\n  '@friendliai/ai-provider': {\n" in output

    def test_helpers_and_types(self, registry):
        """Test derived types and the four helper functions."""
        output, _ = _render(registry)

        assert "export type AISDKModel = typeof ALL_MODELS[number];" in output
        assert 'export type AISDKModelCategory = AISDKModel["category"];' in output
        for name in ("getModelsByProvider", "getModelsByCategory", "getProviders", "getCategories"):
            assert f"export function {name}(" in output

    def test_block_order(self, registry):
        """Test that sections appear in canonical order."""
        output, _ = _render(registry)

        positions = [
            output.index("Generated model types"),
            output.index("// ANTHROPIC Models"),
            output.index("// OPENAI Models"),
            output.index("export const AI_SDK_MODELS"),
            output.index("export const ALL_MODELS"),
            output.index("// Types"),
            output.index("// Utility functions"),
        ]
        assert positions == sorted(positions)

    def test_byte_identical(self, provider_texts):
        """Test that identical input renders identical text."""
        first, _ = _render(build_registry_from_texts(provider_texts))
        second, _ = _render(build_registry_from_texts(provider_texts))

        assert first == second

    def test_collision_declared_once(self):
        """Test that a shared type name is only declared by the first provider."""
        record = ModelTypeRecord(alias_name="XModelId", models=("a",), category="chat")
        registry = build_registry({"foo-bar": [record], "foo/bar": [record]}, on_collision="warn")

        output, _ = _render(registry)

        assert output.count("export type FooBarXModelId") == 1

    def test_total_chars(self, registry):
        """Test that the writer counts what it wrote."""
        output, writer = _render(registry)

        assert writer.total_chars == len(output)


class TestJsonOutput:
    """Test the JSON output format."""

    def test_json_structure(self, registry):
        """Test that JSON output parses and carries both views."""
        output, _ = _render(registry, output_format="json")

        data = json.loads(output)
        assert set(data) == {"registry", "models"}
        assert len(data["models"]) == 19
        assert data["models"][0] == {
            "provider": "anthropic",
            "model": "claude-3-5-sonnet-latest",
            "category": "chat",
            "value": "anthropic:claude-3-5-sonnet-latest",
        }
        assert data["registry"]["openai"]["image"]["OpenaiOpenAIImageModelId"] == ["dall-e-3", "dall-e-2"]


def test_unknown_format():
    """Test that an unknown format is rejected."""
    with pytest.raises(ValueError):
        RegistryWriter(io.StringIO(), output_format="yaml")
