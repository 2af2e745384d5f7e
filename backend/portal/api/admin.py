from flask import g, jsonify, request
from portal.application.content import add_content, delete_content, list_section_contents
from portal.application.snapshot import load_section
from portal.domain.classification import CATEGORIES, CLASSES, CLASS_8_TO_12, SUBJECTS
from portal.domain.exceptions import ValidationFailure
from portal.domain.invariants.content import CONTENT_TYPES
from portal.normalizers.content import normalize_content
from portal.normalizers.section import normalize_section
from portal.store import get_store
from portal.utils.decorators import admin_required, notify_on_failure
from . import api_bp


@api_bp.route("/admin", methods=["GET"])
@admin_required
@notify_on_failure("Failed to load sections")
def admin_dashboard():
    sections = get_store().query_records("sections", order_by="display_order")

    return jsonify({
        "user": {
            "id": g.current_session["user_id"],
            "email": g.current_session.get("email"),
        },
        "sections": [normalize_section(s, admin=True) for s in sections],
        "options": {
            "categories": list(CATEGORIES),
            "classes": list(CLASSES),
            "subjects": list(SUBJECTS),
            "content_types": list(CONTENT_TYPES),
            "class_category": CLASS_8_TO_12,
        },
    })


@api_bp.route("/admin/sections/<section_id>/content", methods=["GET"])
@admin_required
@notify_on_failure("Failed to load section content")
def admin_section_contents(section_id):
    store = get_store()
    section = load_section(store, section_id)

    return jsonify({
        "section": normalize_section(section, admin=True),
        "items": [normalize_content(c, admin=True) for c in list_section_contents(store, section_id)],
    })


@api_bp.route("/admin/content", methods=["POST"])
@admin_required
@notify_on_failure("Failed to add content")
def create_content():
    store = get_store()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    section_id = str(data.get("section_id") or "").strip()
    if not section_id:
        raise ValidationFailure("section_id", "Please select a section")

    section = load_section(store, section_id)
    record = add_content(
        store,
        section=section,
        form=data,
        actor_id=g.current_session["user_id"],
    )

    return jsonify({
        "id": record["id"],
        "message": "Content added successfully",
        "notification": {"level": "success", "message": "Content added successfully"},
        "item": normalize_content(record, admin=True),
        "items": [normalize_content(c, admin=True) for c in list_section_contents(store, section_id)],
    }), 201


@api_bp.route("/admin/content/<content_id>", methods=["DELETE"])
@admin_required
@notify_on_failure("Failed to delete content")
def remove_content(content_id):
    store = get_store()
    removed = delete_content(
        store,
        content_id=content_id,
        actor_id=g.current_session["user_id"],
    )

    return jsonify({
        "id": content_id,
        "message": "Content deleted successfully",
        "notification": {"level": "success", "message": "Content deleted successfully"},
        "items": [
            normalize_content(c, admin=True)
            for c in list_section_contents(store, removed["section_id"])
        ],
    }), 200
