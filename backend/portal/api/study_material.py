# portal/api/study_material.py
from flask import jsonify, redirect
from portal.application.snapshot import load_items, load_section
from portal.domain.navigation import (
    NavigationLevel,
    NavigationPath,
    entry_level,
    resolve,
    section_href,
)
from portal.normalizers.navigation import normalize_navigation
from portal.store import get_store
from portal.utils.decorators import notify_on_failure
from . import api_bp
from .views import class_sort_key


def _render(section_id, path):
    store = get_store()
    section = load_section(store, section_id)
    if entry_level(section) is NavigationLevel.FLAT_CONTENT_LIST:
        return redirect(section_href(section_id), code=302)

    items = load_items(store, section_id)
    view = resolve(section, items, path, class_sort_key=class_sort_key())

    return jsonify(normalize_navigation(section, view))


# ------------------------
# Class-first navigation
# ------------------------

@api_bp.route("/study-material/<section_id>", methods=["GET"])
@notify_on_failure("Failed to load study materials")
def study_material_detail(section_id):
    return _render(section_id, NavigationPath())


@api_bp.route("/study-material/<section_id>/class/<class_num>", methods=["GET"])
@notify_on_failure("Failed to load class details")
def class_detail(section_id, class_num):
    return _render(section_id, NavigationPath(class_num=class_num))


@api_bp.route("/study-material/<section_id>/class/<class_num>/subject/<subject>", methods=["GET"])
@notify_on_failure("Failed to load study materials")
def subject_detail(section_id, class_num, subject):
    return _render(section_id, NavigationPath(class_num=class_num, subject=subject))


# ------------------------
# Category-first navigation
# ------------------------

@api_bp.route("/study-material/<section_id>/category/<category>", methods=["GET"])
@notify_on_failure("Failed to load category details")
def category_detail(section_id, category):
    return _render(section_id, NavigationPath(category=category))


@api_bp.route("/study-material/<section_id>/category/<category>/class/<class_num>", methods=["GET"])
@notify_on_failure("Failed to load class details")
def category_class_detail(section_id, category, class_num):
    return _render(section_id, NavigationPath(category=category, class_num=class_num))


@api_bp.route("/study-material/<section_id>/category/<category>/subject/<subject>", methods=["GET"])
@api_bp.route(
    "/study-material/<section_id>/category/<category>/class/<class_num>/subject/<subject>",
    methods=["GET"],
)
@notify_on_failure("Failed to load study materials")
def category_subject_detail(section_id, category, subject, class_num=None):
    return _render(
        section_id,
        NavigationPath(category=category, class_num=class_num, subject=subject),
    )
