from flask import jsonify
from portal.domain.exceptions import QueryFailure
from portal.store import get_store
from . import api_bp


@api_bp.route("/health", methods=["GET"])
def health_check():
    """Liveness plus a cheap store round trip."""
    try:
        get_store().count_records("sections")
    except QueryFailure:
        return jsonify({
            "status": "degraded",
            "service": "institute-portal",
            "store": "unavailable",
        }), 503

    return jsonify({
        "status": "ok",
        "service": "institute-portal",
        "store": "ok",
    })
