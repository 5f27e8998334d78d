"""Shared fixtures for DocWal SDK tests."""

import re

import pytest

from docwal import DocWalClient

BASE_URL = "https://docwal.test/api"
API_KEY = "docwal_test_key"


@pytest.fixture
def client():
    """Client pointed at a mocked base URL."""
    with DocWalClient(API_KEY, base_url=BASE_URL) as docwal_client:
        yield docwal_client


def _parse_multipart(request) -> dict[str, bytes]:
    content_type = request.headers["content-type"]
    boundary = content_type.split("boundary=")[1].encode()
    fields: dict[str, bytes] = {}
    for part in request.content.split(b"--" + boundary):
        if b"\r\n\r\n" not in part:
            continue
        head, _, value = part.partition(b"\r\n\r\n")
        name = re.search(rb'name="([^"]+)"', head).group(1).decode()
        fields[name] = value[:-2]  # trailing CRLF
    return fields


@pytest.fixture
def multipart_fields():
    """Parse a captured multipart request into {field name: raw value}."""
    return _parse_multipart
