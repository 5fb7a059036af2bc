class TodoError(Exception):
    """Base class for every error the application raises on purpose."""


class ValidationError(TodoError):
    """User-correctable problem: bad input, wrong credentials, not your task."""


class NotFoundError(ValidationError):
    """A name or id did not resolve to a row."""


class StorageError(TodoError):
    """The database could not complete an operation."""
