"""Error taxonomy for catalog fetching, cache access and reconciliation."""

from __future__ import annotations


class LocationBookError(Exception):
    """Base class for all domain errors."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.__class__.__name__)
        self.detail = detail


# Remote catalog -----------------------------------------------------------------


class RemoteCatalogError(LocationBookError):
    """Raised by a remote catalog client; recovered locally by the engine."""


class InvalidURL(RemoteCatalogError):  # noqa: N818
    """The configured catalog endpoint does not form a usable URL."""


class InvalidResponse(RemoteCatalogError):  # noqa: N818
    def __init__(self, status: int, detail: str | None = None) -> None:
        super().__init__(detail or f"Unexpected HTTP status {status}")
        self.status = status


class ParsingError(RemoteCatalogError):
    """The catalog payload could not be decoded."""


class NetworkError(RemoteCatalogError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


# Local cache --------------------------------------------------------------------


class LocalStoreError(LocationBookError):
    """Raised by a local cache store; never recovered by the engine."""


class NotFound(LocalStoreError):  # noqa: N818
    pass


class FetchFailed(LocalStoreError):  # noqa: N818
    pass


class InsertFailed(LocalStoreError):  # noqa: N818
    pass


class UpdateFailed(LocalStoreError):  # noqa: N818
    pass


class DeleteFailed(LocalStoreError):  # noqa: N818
    pass


# Provenance guard ---------------------------------------------------------------


class ProvenanceError(LocationBookError):
    """Raised before any storage access when a remote record is targeted."""


class CannotModifyOnlineRecord(ProvenanceError):  # noqa: N818
    pass


class CannotRemoveOnlineRecord(ProvenanceError):  # noqa: N818
    pass


# Engine-level -------------------------------------------------------------------


class LocationsError(LocationBookError):
    """Errors surfaced to callers of the reconciliation engine."""


class LoadingFailed(LocationsError):  # noqa: N818
    pass


class AddLocationFailed(LocationsError):  # noqa: N818
    pass


class UpdateLocationFailed(LocationsError):  # noqa: N818
    pass


class RemoveRecordFailed(LocationsError):  # noqa: N818
    pass


class LocationNotFound(LocationsError):  # noqa: N818
    pass


# Autocomplete -------------------------------------------------------------------


class AutocompleteError(LocationBookError):
    pass


class NoConnection(AutocompleteError):  # noqa: N818
    pass


class SuggestionsFailed(AutocompleteError):  # noqa: N818
    pass
