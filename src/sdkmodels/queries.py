"""Query helpers over the flat model list of a built registry."""

from typing import Any, Dict, Iterable, List, Optional, Set, Union

from .models import FlatModelEntry
from .registry import Registry


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def _as_set(values: Union[str, Iterable[str], None]) -> Set[str]:
    """Treat a bare string as a single value rather than a sequence of characters."""
    if isinstance(values, str):
        values = [values]
    return {value for value in values or () if not _is_blank(value)}


class ModelQuery:
    """Read-only lookups over a Registry.

    Every method is total: unknown or malformed input yields an empty result,
    and every returned list is a fresh copy.
    """

    def __init__(self, registry: Registry):
        self.registry = registry

    @property
    def entries(self) -> List[FlatModelEntry]:
        return list(self.registry.flat)

    def get_models_by_provider(self, provider: Optional[str]) -> List[FlatModelEntry]:
        """Return every entry of one provider (exact, case-sensitive match)."""
        if _is_blank(provider):
            return []
        return [entry for entry in self.registry.flat if entry.provider == provider]

    def get_models_by_category(self, category: Optional[str]) -> List[FlatModelEntry]:
        """Return every entry of one category (exact, case-sensitive match)."""
        if _is_blank(category):
            return []
        return [entry for entry in self.registry.flat if entry.category == category]

    def get_providers(self) -> List[str]:
        """Return distinct providers in first-seen order."""
        return _unique(entry.provider for entry in self.registry.flat)

    def get_categories(self) -> List[str]:
        """Return distinct categories in first-seen order."""
        return _unique(entry.category for entry in self.registry.flat)

    def get_model_info(self, model: Optional[str]) -> Optional[FlatModelEntry]:
        """Return the first entry carrying this model id, or None."""
        if _is_blank(model):
            return None
        return next((entry for entry in self.registry.flat if entry.model == model), None)

    def is_valid_model(self, model: Optional[str]) -> bool:
        return self.get_model_info(model) is not None

    def find_models(
        self,
        provider: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[FlatModelEntry]:
        """Filter entries by provider and category; empty criteria are ignored."""
        return [
            entry for entry in self.registry.flat
            if (not provider or entry.provider == provider)
            and (not category or entry.category == category)
        ]

    def get_models_by_providers(self, providers: Union[str, Iterable[str]]) -> List[FlatModelEntry]:
        wanted = _as_set(providers)
        if not wanted:
            return []
        return [entry for entry in self.registry.flat if entry.provider in wanted]

    def get_models_by_categories(self, categories: Union[str, Iterable[str]]) -> List[FlatModelEntry]:
        wanted = _as_set(categories)
        if not wanted:
            return []
        return [entry for entry in self.registry.flat if entry.category in wanted]

    def get_model_count(
        self,
        provider: Optional[str] = None,
        category: Optional[str] = None,
    ) -> int:
        if not provider and not category:
            return len(self.registry.flat)
        return len(self.find_models(provider=provider, category=category))

    def get_provider_models(self, provider: Optional[str]) -> Dict[str, List[str]]:
        """Group one provider's model ids by category.

        Args:
            provider: Provider id to look up.

        Returns:
            Mapping of category to model ids, categories in first-seen order.
        """
        grouped: Dict[str, List[str]] = {}
        for entry in self.get_models_by_provider(provider):
            grouped.setdefault(entry.category, []).append(entry.model)
        return grouped

    def get_category_models(self, category: Optional[str]) -> Dict[str, List[str]]:
        """Group one category's model ids by provider, providers in first-seen order."""
        grouped: Dict[str, List[str]] = {}
        for entry in self.get_models_by_category(category):
            grouped.setdefault(entry.provider, []).append(entry.model)
        return grouped
