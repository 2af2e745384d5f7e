from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from portal.domain.exceptions import (
    AuthDenied,
    AuthRequired,
    PortalError,
    QueryFailure,
    RecordNotFound,
    ValidationFailure,
)


def _notification(error, level="error"):
    message = error.notification or error.message
    return {"level": level, "message": message}


def _response(body, status):
    response = jsonify(body)
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(RecordNotFound)
    def handle_not_found(error):
        body = {
            "error": "NotFound",
            "message": error.message,
            "home": "/",
        }
        if error.notification:
            body["notification"] = _notification(error)
        return _response(body, error.status_code)

    @app.errorhandler(QueryFailure)
    def handle_query_failure(error):
        current_app.logger.warning("query failure: %s", error.message)
        return _response({
            "error": "QueryFailure",
            "message": error.message,
            "notification": _notification(error),
            "items": [],
        }, error.status_code)

    @app.errorhandler(ValidationFailure)
    def handle_validation_failure(error):
        return _response({
            "error": "ValidationFailure",
            "field": error.field,
            "message": error.message,
            "notification": _notification(error),
        }, error.status_code)

    @app.errorhandler(AuthRequired)
    @app.errorhandler(AuthDenied)
    def handle_auth(error):
        return _response({
            "error": error.error,
            "message": error.message,
            "notification": _notification(error),
            "redirect": error.redirect_to,
        }, error.status_code)

    @app.errorhandler(PortalError)
    def handle_portal_error(error):
        current_app.logger.error("unhandled portal error: %s", error.message)
        return _response({"error": error.error, "message": error.message}, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        body = {
            "error": error.name.replace(" ", ""),
            "message": error.description,
        }
        if error.code == 404:
            body["home"] = "/"
        return _response(body, error.code or 500)
