import logging

from flask import jsonify, redirect
from portal.application.access import current_session, is_admin
from portal.application.snapshot import load_items, load_section
from portal.domain.exceptions import QueryFailure
from portal.domain.navigation import NavigationLevel, entry_level, resolve, study_material_href
from portal.normalizers.navigation import normalize_navigation
from portal.normalizers.section import normalize_section
from portal.store import eq, get_store
from portal.utils.decorators import notify_on_failure
from . import api_bp

logger = logging.getLogger(__name__)


@api_bp.route("/", methods=["GET"])
@notify_on_failure("Failed to load sections")
def index():
    store = get_store()

    sections = store.query_records(
        "sections",
        [eq("is_active", True)],
        order_by="display_order",
    )
    # Role lookup failures leave the section list intact
    try:
        admin = is_admin(store, current_session(store))
    except QueryFailure as exc:
        logger.warning("admin check failed on index: %s", exc.message)
        admin = False

    return jsonify({
        "sections": [normalize_section(s) for s in sections],
        "is_admin": admin,
        "admin_href": "/admin",
    })


@api_bp.route("/section/<section_id>", methods=["GET"])
@notify_on_failure("Failed to load section details")
def section_detail(section_id):
    store = get_store()
    section = load_section(store, section_id)

    # Study material sections are dispatched before any content is fetched
    if entry_level(section) is NavigationLevel.STUDY_MATERIAL_ROOT:
        return redirect(study_material_href(section_id), code=302)

    items = load_items(store, section_id)
    view = resolve(section, items)

    return jsonify(normalize_navigation(section, view))
