"""Shared exceptions for service layer operations."""


class CredentialsTakenError(Exception):
    """Raised when an email address is already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Credentials taken")


class InvalidCredentialsError(Exception):
    """
    Raised when signin fails.

    Unknown email and wrong password produce the same error so callers
    cannot probe which addresses are registered.
    """

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
