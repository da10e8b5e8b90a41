"""Domain errors raised by the services and rendered by the API layer.

Every error carries a human readable ``message`` and the HTTP ``status_code``
it maps to. Routes never build error responses for these themselves; the
handler registered in ``taskmanager/__init__.py`` does it.
"""


class TaskManagerError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message}


class NotFoundError(TaskManagerError):
    status_code = 404
    default_message = "Not found"


class ValidationError(TaskManagerError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(TaskManagerError):
    status_code = 409
    default_message = "Conflict"


class UnauthorizedError(TaskManagerError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    # Same text for unknown email and wrong password
    default_message = "Invalid credentials"


class EmailTakenError(ConflictError):
    default_message = "Email already in use"


class DuplicateTitleError(ConflictError):
    default_message = "An activity with a similar title already exists"


class AlreadyCompletedError(ConflictError):
    default_message = "Activity already completed on this date"


class InvalidFrequencyError(ValidationError):
    default_message = "Invalid frequency. Use: DAILY, WEEKLY, MONTHLY"


class WrongPasswordError(ValidationError):
    default_message = "Current password is incorrect"


class PasswordTooShortError(ValidationError):
    default_message = "New password must have at least 6 characters"
