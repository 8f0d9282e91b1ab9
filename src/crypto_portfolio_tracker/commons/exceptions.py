class NotAuthenticatedError(ValueError):
    """
    Raised when an operation requires a logged user and there is no session.
    """


class SessionExpiredError(NotAuthenticatedError):
    """
    Raised when the backend rejects the access token (HTTP 401).
    The session has already been cleared when this is raised.
    """
