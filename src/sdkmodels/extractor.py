"""Extraction of model-identifier unions from TypeScript declaration text."""

import re
from typing import Iterable, List, Tuple

from .constants import ALIAS_SUFFIXES, CATEGORY_PRIORITY, DEFAULT_CATEGORY, DEFAULT_EXCLUDED_ALIASES
from .models import ModelTypeRecord


def _alias_pattern(suffix: str) -> "re.Pattern[str]":
    return re.compile(r"\btype\s+(\w*" + suffix + r")\s*=\s*([^;]+);")


ALIAS_PATTERNS = tuple(_alias_pattern(suffix) for suffix in ALIAS_SUFFIXES)

LITERAL_PATTERN = re.compile(r"'([^']+)'")


def extract_aliases(content: str) -> List[Tuple[str, str]]:
    """Find type-alias declarations named after one of the model naming conventions.

    Every pattern is applied to the whole text in turn, so results are ordered
    pattern-first and then by position. An alias matched by more than one
    pattern is returned once per pattern.

    Args:
        content: Full text of a declaration file.

    Returns:
        List of ``(alias_name, definition_text)`` pairs.
    """
    aliases = []
    for pattern in ALIAS_PATTERNS:
        for match in pattern.finditer(content):
            alias_name, definition = match.group(1), match.group(2)
            if not alias_name or not definition.strip():
                continue
            aliases.append((alias_name, definition))
    return aliases


def extract_literals(definition: str) -> List[str]:
    """Return the single-quoted string literals of a union definition, in order."""
    return LITERAL_PATTERN.findall(definition)


def classify_category(alias_name: str) -> str:
    """Map an alias name to exactly one category.

    Args:
        alias_name: Declared type name, e.g. ``OpenAIEmbeddingModelId``.

    Returns:
        The first category keyword contained in the name (case-insensitive),
        or the default category when none matches.
    """
    lowered = alias_name.lower()
    for keyword in CATEGORY_PRIORITY:
        if keyword in lowered:
            return keyword
    return DEFAULT_CATEGORY


def extract_model_types(
    content: str,
    excluded_aliases: Iterable[str] = DEFAULT_EXCLUDED_ALIASES,
) -> List[ModelTypeRecord]:
    """Extract model type records from one provider's declaration text.

    Records are returned in match order and may repeat an alias name;
    deduplication happens when the registry is built.

    Args:
        content: Full text of a declaration file.
        excluded_aliases: Alias names that are never recorded.

    Returns:
        List of ModelTypeRecord objects, one per alias match with literals.
    """
    excluded = frozenset(excluded_aliases)
    records = []
    for alias_name, definition in extract_aliases(content):
        if alias_name in excluded:
            continue
        models = extract_literals(definition)
        if not models:
            continue
        records.append(ModelTypeRecord(
            alias_name=alias_name,
            models=tuple(models),
            category=classify_category(alias_name),
        ))
    return records
