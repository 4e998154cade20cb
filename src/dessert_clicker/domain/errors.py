"""Domain errors for the dessert clicker."""


class DessertClickerError(Exception):
    """Base class for dessert clicker errors."""


class CatalogError(DessertClickerError):
    """Raised when a dessert catalog breaks its ordering rules."""


class SessionNotFoundError(DessertClickerError):
    """Raised when a session id is unknown or already ended."""


class SharingUnavailableError(DessertClickerError):
    """Raised by share targets when no sharing mechanism can take the text."""
