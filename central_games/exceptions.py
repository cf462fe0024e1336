class CentralGamesError(Exception):
    """Base class for every error raised by the platform domain."""


class ValidationError(CentralGamesError, ValueError):
    """An invalid domain operation was attempted (e.g. buying an owned game)."""


class InsufficientFunds(CentralGamesError):
    """The user's balance is below the amount the operation requires."""


class NotFound(CentralGamesError, LookupError):
    """A referenced game or user does not exist."""
