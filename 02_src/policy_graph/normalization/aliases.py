"""Schema-alias lookups shared by every normalizer.

Externally authored documents spell the same field several ways
(``controlAttribute`` / ``control_attribute``, ``seedStates`` /
``entryStates``...). Each field is described once as an ordered tuple of
keys, and these helpers try the keys in that order.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, Mapping)):
        return not value
    return False


def first_present(record: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the value of the first key holding something other than null or blank."""
    for key in keys:
        value = record.get(key)
        if not _is_blank(value):
            return value
    return None


def clean_string(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def first_string(record: Mapping[str, Any], keys: Sequence[str]) -> Optional[str]:
    """Return the first trimmed, non-empty string found under ``keys``."""
    for key in keys:
        text = clean_string(record.get(key))
        if text:
            return text
    return None


def string_list(value: Any) -> List[str]:
    """Coerce a scalar-or-list field into a list of trimmed non-empty strings."""
    if isinstance(value, str):
        items: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        return []
    return [text for text in (clean_string(item) for item in items) if text]


def first_string_list(record: Mapping[str, Any], keys: Sequence[str]) -> List[str]:
    """Return the strings under the first key that yields any."""
    for key in keys:
        values = string_list(record.get(key))
        if values:
            return values
    return []


def dedupe(values: Iterable[str]) -> Tuple[str, ...]:
    """Deduplicate while keeping first-occurrence order."""
    return tuple(dict.fromkeys(values))


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}
