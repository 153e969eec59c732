"""Type registry assembly from per-provider extraction results."""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .constants import COLLISION_POLICIES, DEFAULT_EXCLUDED_ALIASES
from .extractor import extract_model_types
from .models import FlatModelEntry, ModelTypeRecord

NestedRegistry = Mapping[str, Mapping[str, Mapping[str, Tuple[str, ...]]]]

_PREFIX_SEPARATORS = re.compile(r"[-@/]")


class RegistryCollisionError(ValueError):
    """Raised when two providers produce the same unique type name."""

    def __init__(self, type_name: str, first_provider: str, second_provider: str):
        super().__init__(
            f"Type name '{type_name}' is produced by both '{first_provider}' "
            f"and '{second_provider}'"
        )
        self.type_name = type_name
        self.first_provider = first_provider
        self.second_provider = second_provider


def provider_prefix(provider: str) -> str:
    """Build a PascalCase prefix from a provider id (``foo-bar`` -> ``FooBar``)."""
    return "".join(
        part[:1].upper() + part[1:] for part in _PREFIX_SEPARATORS.split(provider)
    )


def unique_type_name(provider: str, alias_name: str) -> str:
    """Return the provider-prefixed type name used as the registry key."""
    return provider_prefix(provider) + alias_name


def dedupe_records(records: Iterable[ModelTypeRecord]) -> List[ModelTypeRecord]:
    """Drop records whose alias name was already seen; first occurrence wins."""
    unique: Dict[str, ModelTypeRecord] = {}
    for record in records:
        unique.setdefault(record.alias_name, record)
    return list(unique.values())


@dataclass(frozen=True)
class Registry:
    """Read-only result of one extraction run.

    Attributes:
        providers: Deduplicated records per provider, in discovery order.
        nested: provider -> category -> unique type name -> models.
        flat: One entry per (provider, model) pair, in canonical order.
        collisions: Unique type names shared by more than one provider.
    """
    providers: Mapping[str, Tuple[ModelTypeRecord, ...]]
    nested: NestedRegistry
    flat: Tuple[FlatModelEntry, ...]
    collisions: Tuple[str, ...] = ()

    @property
    def type_count(self) -> int:
        return sum(len(records) for records in self.providers.values())

    @property
    def model_count(self) -> int:
        return len(self.flat)

    def unique_type_names(self, provider: str) -> List[str]:
        """Return the unique type names of one provider in capture order."""
        return [
            unique_type_name(provider, record.alias_name)
            for record in self.providers.get(provider, ())
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, JSON-serializable copy of both registry views."""
        return {
            "registry": {
                provider: {
                    category: {name: list(models) for name, models in types.items()}
                    for category, types in categories.items()
                }
                for provider, categories in self.nested.items()
            },
            "models": [entry.to_dict() for entry in self.flat],
        }


def build_registry(
    provider_records: Mapping[str, Sequence[ModelTypeRecord]],
    on_collision: str = "error",
    logger: Optional[logging.Logger] = None,
) -> Registry:
    """Build the nested and flat registry views from extracted records.

    Both views are filled in the same pass over the deduplicated records so
    they always agree on providers, categories and model counts.

    Args:
        provider_records: Extracted records per provider, in discovery order.
        on_collision: ``"error"`` to raise on duplicate unique type names
            across providers, ``"warn"`` to log and keep going.
        logger: Optional logger instance.

    Returns:
        The immutable Registry.

    Raises:
        RegistryCollisionError: On a cross-provider collision with ``on_collision="error"``.
        ValueError: If ``on_collision`` is not a known policy.
    """
    if on_collision not in COLLISION_POLICIES:
        raise ValueError(f"Unknown collision policy: {on_collision}")
    logger = logger or logging.getLogger(__name__)

    providers: Dict[str, Tuple[ModelTypeRecord, ...]] = {}
    nested: Dict[str, Mapping[str, Mapping[str, Tuple[str, ...]]]] = {}
    flat: List[FlatModelEntry] = []
    owners: Dict[str, str] = {}
    collisions: List[str] = []

    for provider, records in provider_records.items():
        unique = dedupe_records(records)
        if not unique:
            continue

        categories: Dict[str, Dict[str, Tuple[str, ...]]] = {}
        for record in unique:
            type_name = unique_type_name(provider, record.alias_name)
            owner = owners.setdefault(type_name, provider)
            if owner != provider:
                if on_collision == "error":
                    raise RegistryCollisionError(type_name, owner, provider)
                logger.warning(
                    f"Type name '{type_name}' from '{provider}' collides with '{owner}'"
                )
                collisions.append(type_name)

            categories.setdefault(record.category, {})[type_name] = record.models
            flat.extend(
                FlatModelEntry(provider=provider, model=model, category=record.category)
                for model in record.models
            )

        providers[provider] = tuple(unique)
        nested[provider] = MappingProxyType({
            category: MappingProxyType(types) for category, types in categories.items()
        })

    return Registry(
        providers=MappingProxyType(providers),
        nested=MappingProxyType(nested),
        flat=tuple(flat),
        collisions=tuple(collisions),
    )


def build_registry_from_texts(
    provider_texts: Mapping[str, str],
    excluded_aliases: Iterable[str] = DEFAULT_EXCLUDED_ALIASES,
    on_collision: str = "error",
    logger: Optional[logging.Logger] = None,
) -> Registry:
    """Extract records from in-memory declaration texts and build the registry.

    Args:
        provider_texts: Declaration text per provider, in discovery order.
        excluded_aliases: Alias names that are never recorded.
        on_collision: Collision policy, see ``build_registry``.
        logger: Optional logger instance.

    Returns:
        The immutable Registry.
    """
    excluded = tuple(excluded_aliases)
    return build_registry(
        {
            provider: extract_model_types(text, excluded)
            for provider, text in provider_texts.items()
        },
        on_collision=on_collision,
        logger=logger,
    )
