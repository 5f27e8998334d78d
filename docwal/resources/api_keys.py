"""API key management endpoints."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docwal.client import DocWalClient


class APIKeysResource:
    """Generate, inspect, rotate and revoke the institution API key.

    Generating and rotating keys requires an owner or admin key.
    """

    def __init__(self, client: "DocWalClient") -> None:
        self._client = client

    def generate(self) -> dict[str, Any]:
        """Generate a new API key.

        Returns:
            Response with api_key, created_at and warning.
        """
        return self._client.request("POST", "/institutions/api-keys/generate/")

    def info(self) -> dict[str, Any]:
        """Get masked information about the current API key."""
        return self._client.request("GET", "/institutions/api-keys/info/")

    def regenerate(self) -> dict[str, Any]:
        """Revoke the current key and issue a new one.

        Returns:
            Response with the new api_key.
        """
        return self._client.request("POST", "/institutions/api-keys/regenerate/")

    def revoke(self) -> dict[str, Any]:
        """Revoke the current API key."""
        return self._client.request("POST", "/institutions/api-keys/revoke/")
