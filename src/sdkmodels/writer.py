"""Output writer for sdkmodels."""

import json
from typing import Iterable, Set, TextIO

from .constants import OUTPUT_FORMATS
from .registry import Registry, unique_type_name

HEADER_LINES = (
    "/**",
    " * Generated model types from @ai-sdk providers",
    " * This file is auto-generated - do not edit manually",
    " */",
)

HELPER_LINES = (
    "// Utility functions",
    "export function getModelsByProvider(provider: AISDKProvider): AISDKModel[] {",
    "  return ALL_MODELS.filter(m => m.provider === provider);",
    "}",
    "",
    "export function getModelsByCategory(category: AISDKModelCategory): AISDKModel[] {",
    "  return ALL_MODELS.filter(m => m.category === category);",
    "}",
    "",
    "export function getProviders(): AISDKProvider[] {",
    "  return Array.from(new Set(ALL_MODELS.map(m => m.provider)));",
    "}",
    "",
    "export function getCategories(): AISDKModelCategory[] {",
    "  return Array.from(new Set(ALL_MODELS.map(m => m.category)));",
    "}",
)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _object_key(name: str) -> str:
    return name if name.isidentifier() else _quote(name)


class RegistryWriter:
    """Write a built registry as a TypeScript module or as JSON."""

    def __init__(self, stream: TextIO, output_format: str = "typescript"):
        """Initialize the output writer.

        Args:
            stream: The file-like object to write to.
            output_format: ``"typescript"`` or ``"json"``.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.stream = stream
        self.output_format = output_format
        self.total_chars = 0

    def write_raw(self, text: str) -> None:
        """Write raw text to the stream and update the total character count."""
        self.total_chars += len(text)
        self.stream.write(text)

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_raw(f"{line}\n")

    def write_registry(self, registry: Registry) -> None:
        """Write every section of the registry in canonical order."""
        if self.output_format == "json":
            self.write_json(registry)
            return

        self.write_lines(HEADER_LINES)
        self.write_raw("\n")
        self.write_type_aliases(registry)
        self.write_nested_registry(registry)
        self.write_flat_list(registry)
        self.write_derived_types()
        self.write_raw("\n")
        self.write_query_helpers()

    def write_json(self, registry: Registry) -> None:
        self.write_raw(json.dumps(registry.to_dict(), indent=2))
        self.write_raw("\n")

    def write_type_aliases(self, registry: Registry) -> None:
        """Write one open string-literal union per provider type.

        A type name already declared by an earlier provider is not declared
        again, so the module stays valid when collisions were allowed.
        """
        declared: Set[str] = set()
        for provider, records in registry.providers.items():
            self.write_raw(f"// {provider.upper()} Models\n")
            for record in records:
                type_name = unique_type_name(provider, record.alias_name)
                if type_name in declared:
                    continue
                declared.add(type_name)
                union = " | ".join(_quote(m) for m in record.models)
                self.write_raw(f"export type {type_name} = {union} | (string & {{}});\n")
            self.write_raw("\n")

    def write_nested_registry(self, registry: Registry) -> None:
        self.write_raw("// Model Registry by Provider\n")
        self.write_raw("export const AI_SDK_MODELS = {\n")
        for provider, categories in registry.nested.items():
            self.write_raw(f"  {_object_key(provider)}: {{\n")
            for category, types in categories.items():
                self.write_raw(f"    {category}: {{\n")
                for type_name, models in types.items():
                    values = ", ".join(_quote(m) for m in models)
                    self.write_raw(f"      {type_name}: [{values}],\n")
                self.write_raw("    },\n")
            self.write_raw("  },\n")
        self.write_raw("} as const;\n\n")

    def write_flat_list(self, registry: Registry) -> None:
        self.write_raw("// Flat list of all models with provider prefix\n")
        self.write_raw("export const ALL_MODELS = [\n")
        for entry in registry.flat:
            self.write_raw(
                f"  {{ provider: {_quote(entry.provider)}, model: {_quote(entry.model)}, "
                f"category: {_quote(entry.category)}, value: {_quote(entry.value)} }},\n"
            )
        self.write_raw("] as const;\n\n")

    def write_derived_types(self) -> None:
        self.write_lines((
            "// Types",
            "export type AISDKModel = typeof ALL_MODELS[number];",
            'export type AISDKProvider = AISDKModel["provider"];',
            'export type AISDKModelValue = AISDKModel["value"];',
            'export type AISDKModelCategory = AISDKModel["category"];',
        ))

    def write_query_helpers(self) -> None:
        self.write_lines(HELPER_LINES)
