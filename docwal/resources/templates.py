"""Credential template endpoints."""

import builtins
from typing import TYPE_CHECKING, Any

from docwal._internal.paths import path_segment
from docwal.models import DEFAULT_TEMPLATE_VERSION, TemplateCreate, build_payload

if TYPE_CHECKING:
    from docwal.client import DocWalClient


class TemplatesResource:
    """List, inspect, create, update and deactivate templates."""

    def __init__(self, client: "DocWalClient") -> None:
        self._client = client

    def list(self) -> Any:
        """List all active templates."""
        return self._client.request("GET", "/templates/")

    def get(self, template_id: str) -> dict[str, Any]:
        """Get a template by ID."""
        return self._client.request("GET", f"/templates/{path_segment(template_id)}/")

    def create(
        self,
        name: str,
        description: str,
        credential_type: str,
        schema: builtins.list[dict[str, Any]],
        version: str = DEFAULT_TEMPLATE_VERSION,
    ) -> dict[str, Any]:
        """Create a new credential template.

        Args:
            name: Template name.
            description: Template description.
            credential_type: Type such as "certificate", "diploma" or "transcript".
            schema: Field definitions.
            version: Template version (default: "1.0").

        Returns:
            The created template.

        Raises:
            ParameterError: If a required value is missing.
        """
        payload = build_payload(
            TemplateCreate,
            name=name,
            description=description,
            credential_type=credential_type,
            schema=schema,
            version=version,
        )
        return self._client.request(
            "POST",
            "/templates/",
            json=payload.model_dump(mode="json", by_alias=True),
        )

    def update(self, template_id: str, updates: dict[str, Any]) -> dict[str, Any]:
        """Partially update a template.

        The server creates a new template version when the schema changes.

        Args:
            template_id: Template ID.
            updates: Fields to change; omitted fields are left as they are.
        """
        return self._client.request(
            "PATCH", f"/templates/{path_segment(template_id)}/", json=updates
        )

    def delete(self, template_id: str) -> dict[str, Any]:
        """Deactivate a template (soft delete)."""
        return self._client.request(
            "DELETE", f"/templates/{path_segment(template_id)}/"
        )
