class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when a request payload fails one or more field rules."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__("Invalid request payload")


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} not found")


class NoUsersError(NotFoundError):
    """Raised when listing an empty user collection."""

    def __init__(self):
        super().__init__("User")
        self.message = "No user has been added yet"


class ConflictError(AppError):
    """Raised when a write would break email uniqueness."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class StoreError(AppError):
    """Raised when the document store fails an operation."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)


class HashingError(AppError):
    """Raised when a password cannot be hashed."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)


class StartupError(AppError):
    """Raised when the database is unreachable at startup."""

    def __init__(self, message: str = "Could not connect to the database"):
        super().__init__(message)
