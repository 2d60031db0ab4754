"""Loading update action documents for adu-manifest."""

import json
from pathlib import Path

import httpx

from errors import MalformedJsonError


def parse_action_document(text: str) -> dict:
    """Decode an update action document, which must be a JSON object."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"Update action is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise MalformedJsonError("Update action is not a JSON object")

    return document


def fetch_action_document(action_url: str, timeout: float = 30.0) -> dict:
    """Fetch an update action document from the given URL."""
    response = httpx.get(action_url, timeout=timeout)
    response.raise_for_status()
    return parse_action_document(response.text)


def read_action_document(path: Path) -> dict:
    """Read an update action document from a local file."""
    return parse_action_document(Path(path).read_text(encoding="utf-8"))


def is_remote_source(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_action_document(source: str, timeout: float = 30.0) -> dict:
    """Load an update action from a URL or a file path."""
    if is_remote_source(source):
        return fetch_action_document(source, timeout=timeout)
    return read_action_document(Path(source))
