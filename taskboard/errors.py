class AppError(Exception):
    """Base for errors that map onto an HTTP status and a client-safe message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Missing fields"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Already exists"


class PersistenceError(AppError):
    status_code = 500
    default_message = "Database error"


class ConfigError(Exception):
    """Raised at startup when the configuration cannot be used."""
