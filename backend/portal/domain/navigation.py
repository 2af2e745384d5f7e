# portal/domain/navigation.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Optional
from urllib.parse import quote

from .classification import (
    CLASS_8_TO_12,
    available_values,
    filter_items,
    is_active,
    is_member,
)
from .exceptions import RecordNotFound
from .sections import SectionKind, section_kind


class NavigationLevel(str, Enum):
    FLAT_CONTENT_LIST = "flat_content_list"
    STUDY_MATERIAL_ROOT = "study_material_root"
    CLASS_SELECTED = "class_selected"
    SUBJECT_SELECTED = "subject_selected"
    CATEGORY_SELECTED = "category_selected"
    CLASS_WITHIN_CATEGORY_SELECTED = "class_within_category_selected"
    SUBJECT_WITHIN_CATEGORY_SELECTED = "subject_within_category_selected"


TERMINAL_LEVELS = frozenset({
    NavigationLevel.FLAT_CONTENT_LIST,
    NavigationLevel.SUBJECT_SELECTED,
    NavigationLevel.SUBJECT_WITHIN_CATEGORY_SELECTED,
})


@dataclass(frozen=True)
class NavigationPath:
    category: Optional[str] = None
    class_num: Optional[str] = None
    subject: Optional[str] = None

    def fixed(self) -> dict[str, str]:
        values = {
            "category": self.category,
            "class": self.class_num,
            "subject": self.subject,
        }
        return {key: value for key, value in values.items() if value is not None}

    def extend(self, dimension: str, value: str) -> "NavigationPath":
        if dimension == "class":
            return replace(self, class_num=value)
        return replace(self, **{dimension: value})

    def parent(self) -> Optional["NavigationPath"]:
        if self.subject is not None:
            return replace(self, subject=None)
        if self.class_num is not None:
            return replace(self, class_num=None)
        if self.category is not None:
            return replace(self, category=None)
        return None

    @property
    def is_root(self) -> bool:
        return not self.fixed()


@dataclass
class NavigationView:
    level: NavigationLevel
    path: NavigationPath
    dimension: Optional[str] = None
    options: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    items: list[Any] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.level in TERMINAL_LEVELS

    @property
    def is_empty(self) -> bool:
        if self.is_terminal:
            return not self.items
        return not self.options and not self.categories


# -------------------------------------------------
# Level dispatch
# -------------------------------------------------

def entry_level(section) -> NavigationLevel:
    """Where a visitor opening /section/<id> ends up, decided from the section kind alone."""
    if section_kind(section) is SectionKind.STUDY_MATERIAL:
        return NavigationLevel.STUDY_MATERIAL_ROOT
    return NavigationLevel.FLAT_CONTENT_LIST


def level_for(path: NavigationPath) -> NavigationLevel:
    if path.category is None:
        if path.class_num is None:
            if path.subject is not None:
                raise RecordNotFound("A subject needs a class or category to be selected first.")
            return NavigationLevel.STUDY_MATERIAL_ROOT
        if path.subject is None:
            return NavigationLevel.CLASS_SELECTED
        return NavigationLevel.SUBJECT_SELECTED

    if path.subject is not None:
        return NavigationLevel.SUBJECT_WITHIN_CATEGORY_SELECTED
    if path.class_num is not None:
        return NavigationLevel.CLASS_WITHIN_CATEGORY_SELECTED
    return NavigationLevel.CATEGORY_SELECTED


def _validate_path(path: NavigationPath) -> None:
    for dimension, value in path.fixed().items():
        if not is_member(dimension, value):
            raise RecordNotFound(f"Unknown {dimension}: {value}")

    if (
        path.category is not None
        and path.class_num is not None
        and path.category != CLASS_8_TO_12
    ):
        raise RecordNotFound(f"Category {path.category} is not organised by class.")


def _ordered(items):
    return sorted(items, key=lambda item: item.get("display_order") or 0)


def resolve(
    section,
    items,
    path: Optional[NavigationPath] = None,
    *,
    class_sort_key: Optional[Callable[[str], Any]] = None,
) -> NavigationView:
    """
    Work out which level of the tree to present for `path` within `section`.

    Pickers carry the values that still have content below them; terminal
    levels carry the matching content items ordered by display_order.
    """
    path = path or NavigationPath()

    if entry_level(section) is NavigationLevel.FLAT_CONTENT_LIST:
        if not path.is_root:
            raise RecordNotFound("This section has no study material navigation.")
        return NavigationView(
            level=NavigationLevel.FLAT_CONTENT_LIST,
            path=path,
            items=_ordered(item for item in items if is_active(item)),
        )

    _validate_path(path)
    level = level_for(path)

    if level is NavigationLevel.STUDY_MATERIAL_ROOT:
        return NavigationView(
            level=level,
            path=path,
            dimension="class",
            options=available_values(items, {}, "class", sort_key=class_sort_key),
            categories=available_values(items, {}, "category"),
        )

    if level is NavigationLevel.CATEGORY_SELECTED:
        if path.category == CLASS_8_TO_12:
            return NavigationView(
                level=level,
                path=path,
                dimension="class",
                options=available_values(
                    items, path.fixed(), "class", sort_key=class_sort_key
                ),
            )
        return NavigationView(
            level=level,
            path=path,
            dimension="subject",
            options=available_values(items, path.fixed(), "subject"),
        )

    if level in (
        NavigationLevel.CLASS_SELECTED,
        NavigationLevel.CLASS_WITHIN_CATEGORY_SELECTED,
    ):
        return NavigationView(
            level=level,
            path=path,
            dimension="subject",
            options=available_values(items, path.fixed(), "subject"),
        )

    return NavigationView(
        level=level,
        path=path,
        items=_ordered(filter_items(items, path.fixed())),
    )


# -------------------------------------------------
# Route mapping
# -------------------------------------------------

def _segment(value: str) -> str:
    return quote(str(value), safe="")


def section_href(section_id) -> str:
    return f"/section/{_segment(section_id)}"


def study_material_href(section_id, path: Optional[NavigationPath] = None) -> str:
    path = path or NavigationPath()
    parts = ["/study-material", _segment(section_id)]

    if path.category is not None:
        parts += ["category", _segment(path.category)]
    if path.class_num is not None:
        parts += ["class", _segment(path.class_num)]
    if path.subject is not None:
        parts += ["subject", _segment(path.subject)]

    return "/".join(parts)


def href_for(section, path: Optional[NavigationPath] = None) -> str:
    section_id = section["id"]
    if entry_level(section) is NavigationLevel.FLAT_CONTENT_LIST:
        return section_href(section_id)
    return study_material_href(section_id, path)


def parent_href(section, path: Optional[NavigationPath] = None) -> str:
    parent = (path or NavigationPath()).parent()
    if parent is None:
        return "/"
    return href_for(section, parent)
