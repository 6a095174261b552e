"""
Helpers for layering config sources on top of each other.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Layer one config mapping over another.

    Sections present in both are merged key by key. A ``None`` in the
    override keeps whatever the base had, so an empty ``skill_file:`` line
    in a project file does not wipe out the global setting. Neither input
    is modified.

    Args:
        base: Lower-precedence settings.
        override: Higher-precedence settings.

    Returns:
        A new mapping with the override applied.

    Examples:
        >>> deep_merge({"install": {"force": False, "scope": "global"}}, {"install": {"force": True}})
        {'install': {'force': True, 'scope': 'global'}}
    """
    merged = dict(base)

    for key, value in override.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value

    return merged


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Assign ``value`` at a dotted path such as ``install.scope``.

    Missing sections are created, and a non-mapping found on the way is
    replaced by one. ``config`` is updated in place and returned.
    """
    *sections, leaf = key_path.split(".")

    node = config
    for section in sections:
        child = node.get(section)
        if not isinstance(child, dict):
            child = node[section] = {}
        node = child

    node[leaf] = value
    return config
