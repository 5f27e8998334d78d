"""Pydantic models for DocWal request payloads.

Each model enumerates the options a call accepts along with their defaults.
Response bodies are returned as decoded JSON and are not modeled.
"""

from datetime import datetime
from typing import Any, BinaryIO, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from docwal.exceptions import ParameterError

# =============================================================================
# Constants
# =============================================================================

DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS = 720  # 30 days
DEFAULT_LIST_LIMIT = 100
DEFAULT_TEMPLATE_VERSION = "1.0"
DEFAULT_DOCUMENT_FILENAME = "document.pdf"
DEFAULT_BATCH_FILENAME = "batch.zip"

# Team roles, most to least privileged
Role = Literal["owner", "admin", "issuer"]

# Binary payload accepted for uploads
FileContent = bytes | BinaryIO

# =============================================================================
# Credential Models
# =============================================================================


class CredentialIssue(BaseModel):
    """Payload for issuing a single credential.

    Required fields:
        template_id: Template to issue against
        individual_email: Recipient's email address
        credential_data: Credential field values, keyed by field name

    Optional fields:
        expires_at: Credential expiration (ISO string or datetime)
        claim_token_expires_hours: Claim link lifetime (default: 720)
    """

    template_id: str = Field(min_length=1)
    individual_email: str = Field(min_length=1)
    credential_data: dict[str, Any]
    expires_at: datetime | str | None = None
    claim_token_expires_hours: int = Field(default=DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS, gt=0)


class ClaimLinkResend(BaseModel):
    """Payload for resending a claim link with a fresh token."""

    claim_token_expires_hours: int = Field(default=DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS, gt=0)


class CredentialListQuery(BaseModel):
    """Paging parameters for listing credentials."""

    limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=1)
    offset: int = Field(default=0, ge=0)


class BatchCredential(BaseModel):
    """One recipient row of a batch issuance."""

    individual_email: str = Field(min_length=1)
    credential_data: dict[str, Any]


class BatchIssue(BaseModel):
    """Payload for issuing credentials to many recipients in one request."""

    template_id: str = Field(min_length=1)
    credentials: list[BatchCredential]
    send_notifications: bool = True


# =============================================================================
# Template Models
# =============================================================================


class TemplateCreate(BaseModel):
    """Payload for creating a credential template.

    ``template_schema`` is sent on the wire as ``schema``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    credential_type: str = Field(min_length=1)
    template_schema: list[dict[str, Any]] = Field(alias="schema")
    version: str = DEFAULT_TEMPLATE_VERSION


# =============================================================================
# Team Models
# =============================================================================


class TeamInvite(BaseModel):
    """Payload for inviting a team member."""

    email: str = Field(min_length=1)
    role: Role = "issuer"
    send_email: bool = True
    add_directly: bool = False


class RoleUpdate(BaseModel):
    """Payload for changing a team member's role."""

    role: Role


# =============================================================================
# Helpers
# =============================================================================

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_payload(model_cls: type[ModelT], **values: Any) -> ModelT:
    """Validate call parameters into a request model.

    Raises:
        ParameterError: If a required value is missing or malformed.
    """
    try:
        return model_cls(**values)
    except PydanticValidationError as e:
        raise ParameterError(f"Invalid {model_cls.__name__} parameters: {e}") from e
