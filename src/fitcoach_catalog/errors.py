"""Error types raised by catalog reconciliation."""


class CatalogError(Exception):
    """Base class for catalog errors.

    ``entity_key`` names the class type, exercise or row id that triggered
    the failure so callers can report it.
    """

    def __init__(self, message: str, entity_key: str | None = None):
        super().__init__(message)
        self.entity_key = entity_key

    def __str__(self) -> str:
        message = super().__str__()
        if self.entity_key is None:
            return message
        return f"{message} [{self.entity_key}]"


class ValidationError(CatalogError):
    """A canonical spec or backup file is malformed."""


class StoreConnectionError(CatalogError, ConnectionError):
    """The data store is unreachable or the connection dropped."""


class ConstraintViolation(CatalogError):
    """An insert or delete broke referential integrity."""


class NotFoundError(CatalogError):
    """A planned keep/remove references a row that no longer exists."""
