# This project was developed with assistance from AI tools.
"""Service-layer error taxonomy.

Services raise these; the HTTP layer turns them into Problem Details
responses using ``status_code`` and ``code``. None of them is fatal and
none is retried: the caller shows the message and lets the user resubmit.
"""


class LoanDeskError(Exception):
    """Base class for recoverable business-rule failures."""

    status_code = 400
    code = "loandesk_error"


class NotFoundError(LoanDeskError, LookupError):
    """A referenced department, bank or application id does not exist."""

    status_code = 404
    code = "not_found"


class DuplicateUsernameError(LoanDeskError, ValueError):
    """A department username is already taken (case-insensitive)."""

    status_code = 409
    code = "duplicate_username"


class InvalidTransitionError(LoanDeskError, ValueError):
    """Raised when an application status transition is not allowed."""

    status_code = 409
    code = "invalid_transition"


class InvalidBankBranchError(LoanDeskError, ValueError):
    """The bank/branch pair on a submission does not exist."""

    status_code = 422
    code = "invalid_bank_branch"


class EmptyFieldError(LoanDeskError, ValueError):
    """A required text field was blank."""

    status_code = 422
    code = "empty_field"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is required")


class EmptyPasswordError(EmptyFieldError):
    code = "empty_password"

    def __init__(self, message: str = "Password cannot be empty"):
        super().__init__("password", message)


class AuthenticationError(LoanDeskError):
    """Login failed, or no session is present."""

    status_code = 401
    code = "authentication_failed"


class PermissionDeniedError(LoanDeskError):
    """The current actor's role lacks the capability for an operation."""

    status_code = 403
    code = "permission_denied"


class DuplicateDepartmentCodeError(LoanDeskError, ValueError):
    """Another department already stamps applications with the same code (case-insensitive)."""

    status_code = 409
    code = "duplicate_department_code"
