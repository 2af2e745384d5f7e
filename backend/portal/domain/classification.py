# portal/domain/classification.py
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional

CLASS_8_TO_12 = "Class 8 to 12"

CATEGORIES = ("IIT", "NEET", "CBSE", "NTSE", "Foundation", CLASS_8_TO_12)
CLASSES = ("8", "9", "10", "11", "12")
SUBJECTS = (
    "Math",
    "Physics",
    "Chemistry",
    "Biology",
    "English",
    "Hindi",
    "Social Studies",
)

# Closed enumeration per classification dimension
DIMENSIONS: dict[str, tuple[str, ...]] = {
    "category": CATEGORIES,
    "class": CLASSES,
    "subject": SUBJECTS,
}


def enumeration(dimension: str) -> tuple[str, ...]:
    try:
        return DIMENSIONS[dimension]
    except KeyError:
        raise ValueError(f"Unknown classification dimension: {dimension!r}") from None


def is_member(dimension: str, value: Any) -> bool:
    return isinstance(value, str) and value in enumeration(dimension)


def payload_of(item: Any) -> Mapping[str, Any]:
    """
    Return the classification payload of a content record.

    Records are store dicts; ORM rows are accepted too. Anything that is
    not a mapping is treated as an empty payload.
    """
    if isinstance(item, Mapping):
        data = item.get("content_data")
    else:
        data = getattr(item, "content_data", None)

    return data if isinstance(data, Mapping) else {}


def is_active(item: Any) -> bool:
    if isinstance(item, Mapping):
        return bool(item.get("is_active", True))
    return bool(getattr(item, "is_active", True))


def matches(item: Any, fixed: Mapping[str, str]) -> bool:
    payload = payload_of(item)
    return all(payload.get(key) == value for key, value in fixed.items())


def _check_fixed(fixed: Mapping[str, str]) -> None:
    for key in fixed:
        enumeration(key)


def available_values(
    items: Iterable[Any],
    fixed: Optional[Mapping[str, str]],
    target: str,
    *,
    sort_key: Optional[Callable[[str], Any]] = None,
) -> list[str]:
    """
    Distinct values of `target` among active items matching every fixed dimension.

    Values outside the target's closed enumeration are ignored, as are items
    with missing or malformed payloads. The result is sorted by plain string
    order unless `sort_key` is given, so class "10" comes before "8".
    """
    allowed = enumeration(target)
    fixed = dict(fixed or {})
    _check_fixed(fixed)

    found: set[str] = set()
    for item in items:
        if not is_active(item) or not matches(item, fixed):
            continue

        value = payload_of(item).get(target)
        if isinstance(value, str) and value in allowed:
            found.add(value)

    return sorted(found, key=sort_key)


def filter_items(items: Iterable[Any], fixed: Optional[Mapping[str, str]]) -> list[Any]:
    """Active items whose payload equals every fixed dimension, in input order."""
    fixed = dict(fixed or {})
    _check_fixed(fixed)
    return [item for item in items if is_active(item) and matches(item, fixed)]


def numeric_class_key(value: str) -> int:
    return int(value)
