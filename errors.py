"""Errors raised while extracting an update manifest from an action document."""


class ManifestError(ValueError):
    """Base error for a malformed update action or manifest.

    Attributes:
        field: Wire name of the field being read, if any.
        index: Position of the file in the manifest's ``files`` map, if any.
        file_id: Key of the file in the manifest's ``files`` map, if any.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        index: int | None = None,
        file_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.index = index
        self.file_id = file_id


class MissingFieldError(ManifestError):
    """A required field is absent, has the wrong type, or is empty."""


class MalformedJsonError(ManifestError):
    """A string that should hold a JSON object does not decode to one."""


class NoFilesDeclaredError(ManifestError):
    """The manifest's ``files`` map is empty."""


class NoFileUrlsError(ManifestError):
    """The action's ``fileUrls`` map is missing or empty."""


class FileUrlCountMismatchError(ManifestError):
    """There are fewer ``fileUrls`` entries than declared files."""


class MissingHashesError(ManifestError):
    """A file descriptor has no ``hashes`` object."""


class EmptyHashSetError(ManifestError):
    """A ``hashes`` object has no entries."""


class InvalidHashEntryError(ManifestError):
    """A hash entry has a non-string or empty algorithm or value."""


class InvalidFileEntityError(ManifestError):
    """A file descriptor is missing required fields or has invalid ones."""


class AllocationFailureError(ManifestError):
    """Memory ran out while building entities."""
