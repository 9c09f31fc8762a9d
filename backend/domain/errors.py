"""
Errors raised by the catalog controllers and repositories.

The application maps them to HTTP statuses in one place (see api.main).
"""


class CatalogError(Exception):
    """Base class for catalog failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """A required entity does not exist."""

    status_code = 404


class StorageError(CatalogError):
    """The database failed, e.g. lost connection or a constraint violation."""

    status_code = 500
