"""Tree formatting utilities for sdkmodels."""

from typing import List, Tuple

from .registry import Registry


# ASCII tree drawing constants
PREFIX_MIDDLE = "├── "
PREFIX_LAST = "└── "
PREFIX_PASS = "│   "
PREFIX_EMPTY = "    "


def _pointer(is_last: bool) -> Tuple[str, str]:
    """Return the (pointer, child indent) pair for an entry."""
    if is_last:
        return PREFIX_LAST, PREFIX_EMPTY
    return PREFIX_MIDDLE, PREFIX_PASS


def format_registry_tree(registry: Registry) -> List[str]:
    """Render the nested registry as ASCII tree lines.

    Args:
        registry: The built registry.

    Returns:
        One line per provider, category and unique type name.
    """
    lines = []
    providers = list(registry.nested.items())

    for p_index, (provider, categories) in enumerate(providers):
        pointer, provider_indent = _pointer(p_index == len(providers) - 1)
        lines.append(f"{pointer}{provider}/")

        category_items = list(categories.items())
        for c_index, (category, types) in enumerate(category_items):
            pointer, category_indent = _pointer(c_index == len(category_items) - 1)
            lines.append(f"{provider_indent}{pointer}{category}/")

            type_items = list(types.items())
            for t_index, (type_name, models) in enumerate(type_items):
                pointer, _ = _pointer(t_index == len(type_items) - 1)
                noun = "model" if len(models) == 1 else "models"
                lines.append(
                    f"{provider_indent}{category_indent}{pointer}{type_name} ({len(models)} {noun})"
                )

    return lines
