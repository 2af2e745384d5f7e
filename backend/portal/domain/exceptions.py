class PortalError(Exception):
    """
    Base for every failure a view can render.

    Each subclass fixes the HTTP status it maps to. `notification` is the
    user-facing text shown as a transient toast; views attach their own
    wording through `notify_on_failure`.
    """

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, *, notification: str | None = None):
        self.message = message or self.default_message
        self.notification = notification
        super().__init__(self.message)

    @property
    def error(self) -> str:
        return type(self).__name__


class RecordNotFound(PortalError):
    status_code = 404
    default_message = "The requested record could not be found."

    def __init__(self, message=None, *, table=None, record_id=None, notification=None):
        super().__init__(message, notification=notification)
        self.table = table
        self.record_id = record_id


class QueryFailure(PortalError):
    status_code = 503
    default_message = "The content store could not complete the request."


class ValidationFailure(PortalError):
    status_code = 400
    default_message = "A required field is missing."

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message)
        self.field = field


class AuthRequired(PortalError):
    status_code = 401
    default_message = "Please sign in to continue."
    redirect_to = "/auth"


class AuthDenied(PortalError):
    status_code = 403
    default_message = "Access denied: Admin privileges required"
    redirect_to = "/"

