from flask import request, jsonify
from portal.application.access import authenticate, current_session, is_admin
from portal.domain.exceptions import ValidationFailure
from portal.store import get_store
from . import api_bp


@api_bp.route("/auth", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        raise ValidationFailure("body", "Invalid request body")

    email = str(data.get("email") or "").strip()
    password = str(data.get("password") or "")

    if not email or not password:
        raise ValidationFailure(
            "email" if not email else "password",
            "Email and password required",
        )

    session = authenticate(get_store(), email=email, password=password)

    return jsonify({
        "access_token": session["access_token"],
        "user_id": session["user_id"],
        "email": session["email"],
        "is_admin": session["is_admin"],
        "redirect": "/admin" if session["is_admin"] else "/",
    }), 200


@api_bp.route("/auth", methods=["GET"])
def session_status():
    store = get_store()
    session = current_session(store)

    if not session:
        return jsonify({"authenticated": False, "is_admin": False}), 200

    return jsonify({
        "authenticated": True,
        "user_id": session["user_id"],
        "email": session.get("email"),
        "is_admin": is_admin(store, session),
    }), 200
