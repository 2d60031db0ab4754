"""Extraction of the update id and file entities from an update action.

The update action is a decoded JSON object of the form:

{
    "updateManifest": "<JSON object serialized as a string>",
    "fileUrls": {"<fileId>": "<uri>", ...},
    ...
}

where the decoded updateManifest looks like:

{
    "updateId": {"provider": "Azure", "name": "IOT-Firmware", "version": "1.2.0.0"},
    "files": {
        "0001": {
            "fileName": "fileName",
            "sizeInBytes": 1024,
            "arguments": "--flag",
            "hashes": {"sha256": "base64_encoded_hash_value"}
        }
    }
}

Every call decodes updateManifest afresh and returns fully built, immutable
values, or raises a ManifestError and returns nothing.
"""

import json
from collections.abc import Mapping

from entities import FileEntity, Hash, UpdateId
from errors import (
    AllocationFailureError,
    EmptyHashSetError,
    FileUrlCountMismatchError,
    InvalidFileEntityError,
    MalformedJsonError,
    ManifestError,
    MissingFieldError,
    MissingHashesError,
    NoFilesDeclaredError,
    NoFileUrlsError,
)
from logging_setup import get_logger

FIELD_UPDATE_MANIFEST = "updateManifest"
FIELD_UPDATE_ID = "updateId"
FIELD_PROVIDER = "provider"
FIELD_NAME = "name"
FIELD_VERSION = "version"
FIELD_FILES = "files"
FIELD_FILE_URLS = "fileUrls"
FIELD_FILENAME = "fileName"
FIELD_SIZE_IN_BYTES = "sizeInBytes"
FIELD_ARGUMENTS = "arguments"
FIELD_HASHES = "hashes"

logger = get_logger()


def get_update_manifest_root(action: Mapping) -> dict:
    """Decode the updateManifest string embedded in an update action.

    Raises:
        MissingFieldError: action is not an object or has no string updateManifest.
        MalformedJsonError: updateManifest does not decode to a JSON object.
    """
    if not isinstance(action, Mapping):
        raise MissingFieldError("Update action is not a JSON object")

    manifest_string = action.get(FIELD_UPDATE_MANIFEST)
    if not isinstance(manifest_string, str):
        raise MissingFieldError(
            "Update action does not include an updateManifest string",
            field=FIELD_UPDATE_MANIFEST,
        )

    try:
        manifest = json.loads(manifest_string)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(
            f"updateManifest is not valid JSON: {e}",
            field=FIELD_UPDATE_MANIFEST,
        ) from e

    if not isinstance(manifest, dict):
        raise MalformedJsonError(
            "updateManifest is not a JSON object",
            field=FIELD_UPDATE_MANIFEST,
        )

    return manifest


def build_hash_array(hashes: Mapping) -> tuple[Hash, ...]:
    """Build one Hash per algorithm in the hashes object, in its key order."""
    if not hashes:
        raise EmptyHashSetError("No hashes", field=FIELD_HASHES)

    return tuple(Hash.create(hash_type, hash_value) for hash_type, hash_value in hashes.items())


def get_update_id(action: Mapping) -> UpdateId:
    """Extract the update id from the update action's manifest.

    Raises MissingFieldError if the manifest can't be resolved or any of
    provider, name and version is missing or empty.
    """
    try:
        try:
            manifest = get_update_manifest_root(action)
        except ManifestError as e:
            raise MissingFieldError(
                f"updateManifest could not be resolved: {e}",
                field=FIELD_UPDATE_MANIFEST,
            ) from e

        update_id = manifest.get(FIELD_UPDATE_ID)
        if not isinstance(update_id, dict):
            raise MissingFieldError(
                "updateManifest does not include an updateId object",
                field=FIELD_UPDATE_ID,
            )

        return UpdateId.create(
            update_id.get(FIELD_PROVIDER),
            update_id.get(FIELD_NAME),
            update_id.get(FIELD_VERSION),
        )
    except MemoryError as e:
        raise AllocationFailureError("Out of memory building updateId") from e
    except ManifestError as e:
        logger.error("Invalid update action: %s", e)
        raise


def _parse_size(value: object, index: int, file_id: str) -> int:
    # sizeInBytes arrives both as a JSON number and as a digit string.
    if not isinstance(value, bool):
        if isinstance(value, int) and value >= 0:
            return value
        if isinstance(value, float) and value.is_integer() and value >= 0:
            return int(value)
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)

    raise InvalidFileEntityError(
        f"File {file_id} has invalid sizeInBytes {value!r}",
        field=FIELD_SIZE_IN_BYTES,
        index=index,
        file_id=file_id,
    )


def _build_file_entity(index: int, file_id: str, descriptor: object, uri: object) -> FileEntity:
    if not isinstance(descriptor, dict):
        raise InvalidFileEntityError(
            f"File {file_id} is not a JSON object",
            index=index,
            file_id=file_id,
        )

    hashes_obj = descriptor.get(FIELD_HASHES)
    if not isinstance(hashes_obj, dict):
        raise MissingHashesError(
            f"No hash for file @ {index}",
            field=FIELD_HASHES,
            index=index,
            file_id=file_id,
        )

    try:
        hashes = build_hash_array(hashes_obj)
    except ManifestError as e:
        e.index = index
        e.file_id = file_id
        raise

    target_filename = descriptor.get(FIELD_FILENAME)
    if not isinstance(target_filename, str):
        target_filename = None

    arguments = descriptor.get(FIELD_ARGUMENTS)
    if arguments is not None and not isinstance(arguments, str):
        raise InvalidFileEntityError(
            f"File {file_id} has non-string arguments",
            field=FIELD_ARGUMENTS,
            index=index,
            file_id=file_id,
        )

    size_in_bytes = descriptor.get(FIELD_SIZE_IN_BYTES)
    if size_in_bytes is not None:
        size_in_bytes = _parse_size(size_in_bytes, index, file_id)

    try:
        return FileEntity.create(
            file_id,
            target_filename,
            uri if isinstance(uri, str) else None,
            hashes,
            arguments=arguments,
            size_in_bytes=size_in_bytes,
        )
    except ManifestError as e:
        e.index = index
        raise


def get_files(action: Mapping) -> tuple[FileEntity, ...]:
    """Build the file entities declared by the update action's manifest.

    The download URI of the file at position i in the manifest's files map is
    the value at position i of the action's fileUrls map. Keys are not
    compared: this relies on both objects keeping document order.

    fileUrls may hold more entries than files (a bundle manifest lists only
    its component manifests while fileUrls covers every file they reference),
    never fewer.

    An empty fileName and non-string arguments are rejected rather than
    treated as absent. A
    null sizeInBytes or arguments means unspecified.
    """
    try:
        manifest = get_update_manifest_root(action)

        files = manifest.get(FIELD_FILES)
        if not isinstance(files, dict):
            raise MissingFieldError(
                f"Invalid json - '{FIELD_FILES}' missing or incorrect",
                field=FIELD_FILES,
            )
        if not files:
            raise NoFilesDeclaredError(
                "An update manifest must contain at least one file.",
                field=FIELD_FILES,
            )

        file_urls = action.get(FIELD_FILE_URLS)
        if not isinstance(file_urls, dict) or not file_urls:
            raise NoFileUrlsError("File URLs is empty.", field=FIELD_FILE_URLS)

        if len(file_urls) < len(files):
            raise FileUrlCountMismatchError(
                f"File URLs count ({len(file_urls)}) is less than "
                f"updateManifest's files count ({len(files)}).",
                field=FIELD_FILE_URLS,
            )

        uris = list(file_urls.values())
        entities = []
        for index, (file_id, descriptor) in enumerate(files.items()):
            entities.append(_build_file_entity(index, file_id, descriptor, uris[index]))
            logger.debug("Parsed file %s (%s)", file_id, entities[-1].target_filename)

        return tuple(entities)
    except MemoryError as e:
        raise AllocationFailureError("Out of memory building file entities") from e
    except ManifestError as e:
        logger.error("Invalid update action: %s", e)
        raise
