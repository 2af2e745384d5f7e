# portal/normalizers/navigation.py
from __future__ import annotations

from typing import Any, Dict, Optional

from portal.domain.navigation import (
    NavigationLevel,
    NavigationView,
    href_for,
    parent_href,
)
from .content import normalize_content
from .section import normalize_section

SUBJECT_ICONS = {
    "Math": "Calculator",
    "Physics": "Atom",
    "Chemistry": "FlaskConical",
    "Biology": "Leaf",
    "English": "Book",
    "Hindi": "Languages",
    "Social Studies": "Globe",
}

HEADINGS = {
    "class": "Select Your Class",
    "subject": "Select Your Subject",
}


def _option(section, view: NavigationView, dimension: str, value: str) -> Dict[str, Any]:
    if dimension == "class":
        label, icon = f"Class {value}", "GraduationCap"
    elif dimension == "subject":
        label, icon = value, SUBJECT_ICONS.get(value, "BookOpen")
    else:
        label, icon = value, "BookOpen"

    return {
        "value": value,
        "label": label,
        "icon": icon,
        "href": href_for(section, view.path.extend(dimension, value)),
    }


def placeholder_for(view: NavigationView) -> Optional[Dict[str, str]]:
    """The "nothing here yet" card shown instead of an empty grid."""
    if not view.is_empty:
        return None

    path = view.path

    if view.level is NavigationLevel.FLAT_CONTENT_LIST:
        return {
            "title": "No Content Available",
            "message": "Content for this section is being prepared. Please check back later.",
        }

    if view.level is NavigationLevel.STUDY_MATERIAL_ROOT:
        return {
            "title": "No Study Materials Available",
            "message": "Study materials are being organized by class. Please check back later.",
        }

    if view.level is NavigationLevel.CLASS_SELECTED:
        return {
            "title": "No Subjects Available",
            "message": f"Study materials for Class {path.class_num} are being organized. Please check back later.",
        }

    if view.level in (
        NavigationLevel.CATEGORY_SELECTED,
        NavigationLevel.CLASS_WITHIN_CATEGORY_SELECTED,
    ):
        scope = path.category
        if path.class_num:
            scope = f"{path.category} - Class {path.class_num}"
        return {
            "title": "No Content Available",
            "message": f"Study materials for {scope} are being organized. Please check back later.",
        }

    scope = " - ".join(
        part for part in (
            path.category,
            f"Class {path.class_num}" if path.class_num else None,
            path.subject,
        ) if part
    )
    return {
        "title": "No Study Materials Available",
        "message": f"Study materials for {scope} are being prepared. Please check back later.",
    }


def normalize_navigation(section, view: NavigationView) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "level": view.level.value,
        "section": normalize_section(section),
        "back": parent_href(section, view.path),
        "path": view.path.fixed(),
        "placeholder": placeholder_for(view),
    }

    if view.is_terminal:
        data["items"] = [normalize_content(item) for item in view.items]
        return data

    data["heading"] = HEADINGS.get(view.dimension)
    data["options"] = [
        _option(section, view, view.dimension, value) for value in view.options
    ]
    if view.level is NavigationLevel.STUDY_MATERIAL_ROOT:
        data["categories"] = [
            _option(section, view, "category", value) for value in view.categories
        ]

    return data
