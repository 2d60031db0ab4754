"""Value types produced from an update manifest."""

from dataclasses import dataclass

from errors import InvalidFileEntityError, InvalidHashEntryError, MissingFieldError


@dataclass(frozen=True)
class Hash:
    type: str
    value: str

    @classmethod
    def create(cls, hash_type: object, hash_value: object) -> "Hash":
        """Build a hash entry, trimming whitespace from both parts.

        Raises InvalidHashEntryError if either part is not a string or is
        empty after trimming.
        """
        if not isinstance(hash_type, str) or not isinstance(hash_value, str):
            raise InvalidHashEntryError(
                f"Hash entry {hash_type!r} must have a string value",
                field=str(hash_type),
            )

        hash_type = hash_type.strip()
        hash_value = hash_value.strip()
        if not hash_type or not hash_value:
            raise InvalidHashEntryError(
                "Hash algorithm and value must not be empty",
                field=hash_type or None,
            )

        return cls(type=hash_type, value=hash_value)


@dataclass(frozen=True)
class FileEntity:
    file_id: str
    target_filename: str
    download_uri: str
    hashes: tuple[Hash, ...]
    arguments: str | None = None
    size_in_bytes: int | None = None

    @property
    def declared_size(self) -> int:
        """Size in bytes, 0 when the manifest does not declare one."""
        return self.size_in_bytes if self.size_in_bytes is not None else 0

    @classmethod
    def create(
        cls,
        file_id: str | None,
        target_filename: str | None,
        download_uri: str | None,
        hashes: tuple[Hash, ...] | None,
        arguments: str | None = None,
        size_in_bytes: int | None = None,
    ) -> "FileEntity":
        """Build a file entity, checking the required parts are present.

        download_uri may be None or empty: a resumed install or apply action
        carries no download location.
        """
        if not file_id:
            raise InvalidFileEntityError("File entity requires a file id", field="fileId")
        if not target_filename:
            raise InvalidFileEntityError(
                f"File {file_id} requires a target filename",
                field="fileName",
                file_id=file_id,
            )
        if not hashes:
            raise InvalidFileEntityError(
                f"File {file_id} requires at least one hash",
                field="hashes",
                file_id=file_id,
            )

        return cls(
            file_id=file_id,
            target_filename=target_filename,
            download_uri=download_uri or "",
            hashes=tuple(hashes),
            arguments=arguments,
            size_in_bytes=size_in_bytes,
        )

    def to_dict(self) -> dict:
        return {
            "fileId": self.file_id,
            "fileName": self.target_filename,
            "downloadUri": self.download_uri,
            "arguments": self.arguments,
            "sizeInBytes": self.size_in_bytes,
            "hashes": {h.type: h.value for h in self.hashes},
        }


@dataclass(frozen=True)
class UpdateId:
    provider: str
    name: str
    version: str

    @classmethod
    def create(cls, provider: object, name: object, version: object) -> "UpdateId":
        """Build an update id; every part must be a non-empty string."""
        for field, value in (("provider", provider), ("name", name), ("version", version)):
            if not isinstance(value, str) or not value:
                raise MissingFieldError(
                    f"updateId.{field} is missing or empty",
                    field=field,
                )

        return cls(provider=provider, name=name, version=version)

    def __str__(self) -> str:
        return f"{self.provider}/{self.name}:{self.version}"

    def to_dict(self) -> dict:
        return {"provider": self.provider, "name": self.name, "version": self.version}
