"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when caller input is missing or malformed.

    Always raised before any store access, so no side effect has happened.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StoreError(Exception):
    """Raised when the database rejects or fails an operation.

    Carries the underlying driver message unchanged in ``message``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(message)


class MetadataFetchError(Exception):
    """Raised when a website cannot be fetched for metadata extraction."""

    def __init__(self, url: str, status_code: int | None = None, message: str | None = None):
        self.url = url
        self.status_code = status_code
        if message is None:
            message = f"Failed to fetch: {status_code}"
        self.message = message
        super().__init__(message)
