"""Custom exception hierarchy."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(CatalogError):
    """Error from the remote catalog provider.

    Raised for transport failures, non-success HTTP statuses and payloads
    that cannot be decoded. The message is kept human readable because
    not-found classification matches on it.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class CursorParseError(CatalogError):
    """The ``next`` page reference could not be decoded into an offset."""

    def __init__(
        self,
        message: str,
        cursor: str | None = None,
        resource_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.resource_type = resource_type


class PaginationLoopError(CatalogError):
    """Pagination revisited an offset or exceeded its page budget."""

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.resource_type = resource_type
        self.offset = offset


class HydrationError(CatalogError):
    """Fetching the detailed record for one resource failed.

    The original error text is kept verbatim in the message so that
    substring classification sees the same text the remote client produced.
    """

    def __init__(self, resource_type: str, key: str, cause: BaseException) -> None:
        super().__init__(f"{resource_type} '{key}': {cause}")
        self.resource_type = resource_type
        self.key = key
        self.cause = cause


class ValidationError(CatalogError):
    """Invalid caller input (empty key, unknown column, bad config)."""

    pass


class TableNotFoundError(ValidationError):
    """Requested table is not registered with the plugin."""

    def __init__(self, table_name: str) -> None:
        super().__init__(f"Table '{table_name}' is not registered")
        self.table_name = table_name
