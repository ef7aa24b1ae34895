"""User-related domain exceptions."""

from .base import DomainException


class UserNotFoundException(DomainException):
    """Raised when a user cannot be found."""

    def __init__(self, user_ref: str):
        super().__init__(
            message=f"User not found: {user_ref}",
            code="USER_NOT_FOUND",
        )
        self.user_ref = user_ref


class UserAlreadyExistsException(DomainException):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            message=f"User already exists: {email}",
            code="USER_ALREADY_EXISTS",
        )
        self.email = email


class InvalidUserRequestException(DomainException):
    """Raised when a user registration request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_USER_REQUEST",
        )
