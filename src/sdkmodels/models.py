"""Value types shared by the extractor, registry and query layers."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ModelTypeRecord:
    """A single type alias extracted from a declaration file.

    Attributes:
        alias_name: The declared type identifier as found in the source text.
        models: Literal values of the union, in order of appearance.
        category: One of the fixed categories, assigned at extraction time.
    """
    alias_name: str
    models: Tuple[str, ...]
    category: str


@dataclass(frozen=True)
class FlatModelEntry:
    """One (provider, model) pair in the denormalized model list."""
    provider: str
    model: str
    category: str

    @property
    def value(self) -> str:
        """Provider-qualified model identifier, e.g. ``openai:gpt-4o``."""
        return f"{self.provider}:{self.model}"

    def to_dict(self) -> Dict[str, str]:
        """Return the wire shape ``{provider, model, category, value}``."""
        return {
            "provider": self.provider,
            "model": self.model,
            "category": self.category,
            "value": self.value,
        }
