"""Encoding of caller-supplied IDs into URL paths."""

import urllib.parse

from docwal.exceptions import ParameterError

DOT_SEGMENTS = frozenset({".", ".."})


def path_segment(value: str) -> str:
    """Encode an ID as exactly one URL path segment.

    Slashes and other reserved characters are percent-encoded so the ID
    cannot reach a different endpoint.

    Raises:
        ParameterError: If the ID is empty or a dot segment.
    """
    if not isinstance(value, str) or not value:
        raise ParameterError(f"ID must be a non-empty string, got {value!r}")
    if value in DOT_SEGMENTS:
        raise ParameterError(f"ID must not be a dot segment, got {value!r}")
    return urllib.parse.quote(value, safe="")
