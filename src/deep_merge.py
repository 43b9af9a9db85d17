"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for specific keys.
    - 'archive_schemes' is additive, deduplicated and sorted.
    - 'classpath' is additive, deduplicated, in search order.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key == "archive_schemes"
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged_set = {s.lower() for s in result[key]}
            merged_set.update(s.lower() for s in value)
            result[key] = sorted(merged_set)
        elif (
            key == "classpath"
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Search order matters, so keep first occurrences in place
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result
