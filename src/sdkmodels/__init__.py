"""Standardize the public API for the sdkmodels package."""

from .cli import build_argument_parser, parse_arguments
from .config import ConfigError, is_safe_to_create_config, load_env_file, load_or_create_config, validate_config
from .constants import CATEGORIES, CONFIG_FILENAME, DEFAULT_CATEGORY, DEFAULT_EXCLUDED_ALIASES
from .core import DiscoverySession, ExtractionSettings, ProviderSource
from .engine import ExtractionEngine, ExtractionSummary, extract_provider_records
from .extractor import classify_category, extract_aliases, extract_literals, extract_model_types
from .formatters import format_registry_tree
from .models import FlatModelEntry, ModelTypeRecord
from .processors import detect_file_encoding, read_declaration
from .queries import ModelQuery
from .registry import (
    Registry,
    RegistryCollisionError,
    build_registry,
    build_registry_from_texts,
    dedupe_records,
    provider_prefix,
    unique_type_name,
)
from .writer import RegistryWriter

__version__ = "1.0.0"

__all__ = [
    "build_argument_parser",
    "parse_arguments",
    "ConfigError",
    "load_or_create_config",
    "load_env_file",
    "validate_config",
    "is_safe_to_create_config",
    "CATEGORIES",
    "CONFIG_FILENAME",
    "DEFAULT_CATEGORY",
    "DEFAULT_EXCLUDED_ALIASES",
    "DiscoverySession",
    "ExtractionSettings",
    "ProviderSource",
    "ExtractionEngine",
    "ExtractionSummary",
    "extract_provider_records",
    "extract_aliases",
    "extract_literals",
    "classify_category",
    "extract_model_types",
    "format_registry_tree",
    "FlatModelEntry",
    "ModelTypeRecord",
    "detect_file_encoding",
    "read_declaration",
    "ModelQuery",
    "Registry",
    "RegistryCollisionError",
    "build_registry",
    "build_registry_from_texts",
    "dedupe_records",
    "provider_prefix",
    "unique_type_name",
    "RegistryWriter",
]
