"""Tests for request payload models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

import docwal
from docwal import models
from docwal.exceptions import ParameterError
from docwal.models import (
    DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS,
    DEFAULT_LIST_LIMIT,
    BatchCredential,
    BatchIssue,
    ClaimLinkResend,
    CredentialIssue,
    CredentialListQuery,
    RoleUpdate,
    TeamInvite,
    TemplateCreate,
    build_payload,
)


class TestCredentialIssue:
    """Tests for CredentialIssue model."""

    def test_defaults(self):
        """Should default the claim window to 30 days and omit expiry."""
        payload = CredentialIssue(
            template_id="template-123",
            individual_email="student@example.com",
            credential_data={"student_name": "John Doe"},
        )
        assert payload.claim_token_expires_hours == DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS == 720
        assert payload.expires_at is None

    def test_keeps_field_order(self):
        """Credential data should keep insertion order."""
        data = {"z": 1, "a": 2, "m": 3}
        payload = CredentialIssue(template_id="t", individual_email="e", credential_data=data)
        assert list(payload.model_dump()["credential_data"]) == ["z", "a", "m"]

    def test_datetime_expiry_serialized_as_iso(self):
        """A datetime expiry should be dumped as an ISO string."""
        payload = CredentialIssue(
            template_id="t",
            individual_email="e",
            credential_data={},
            expires_at=datetime(2030, 1, 1, tzinfo=UTC),
        )
        dumped = payload.model_dump(mode="json")
        assert dumped["expires_at"].startswith("2030-01-01T00:00:00")

    def test_string_expiry_kept(self):
        """A string expiry should be sent unchanged."""
        payload = CredentialIssue(
            template_id="t",
            individual_email="e",
            credential_data={},
            expires_at="2030-01-01",
        )
        assert payload.model_dump(mode="json")["expires_at"] == "2030-01-01"

    def test_empty_template_id_rejected(self):
        """Should reject an empty template id."""
        with pytest.raises(PydanticValidationError):
            CredentialIssue(template_id="", individual_email="e", credential_data={})

    def test_missing_credential_data_rejected(self):
        """Should require credential data."""
        with pytest.raises(PydanticValidationError):
            CredentialIssue(template_id="t", individual_email="e")


class TestClaimLinkResend:
    """Tests for ClaimLinkResend model."""

    def test_default_window(self):
        """Should default to the same 30 day window as issuance."""
        assert ClaimLinkResend().claim_token_expires_hours == 720

    @pytest.mark.parametrize("hours", [0, -1])
    def test_rejects_non_positive_window(self, hours):
        """A claim link cannot expire immediately or in the past."""
        with pytest.raises(PydanticValidationError):
            ClaimLinkResend(claim_token_expires_hours=hours)

    def test_issue_rejects_non_positive_window(self):
        """CredentialIssue should apply the same bound."""
        with pytest.raises(PydanticValidationError):
            CredentialIssue(
                template_id="t", individual_email="e", credential_data={}, claim_token_expires_hours=0
            )


class TestCredentialListQuery:
    """Tests for CredentialListQuery model."""

    def test_defaults(self):
        """Should default to the first page of 100."""
        assert CredentialListQuery().model_dump() == {"limit": DEFAULT_LIST_LIMIT, "offset": 0}
        assert DEFAULT_LIST_LIMIT == 100

    @pytest.mark.parametrize(("limit", "offset"), [(0, 0), (-5, 0), (10, -1)])
    def test_rejects_out_of_range(self, limit, offset):
        """limit must be at least 1 and offset non-negative."""
        with pytest.raises(PydanticValidationError):
            CredentialListQuery(limit=limit, offset=offset)


class TestBatchModels:
    """Tests for batch issuance models."""

    def test_accepts_dicts_and_models(self):
        """Rows may be plain dicts or BatchCredential instances."""
        payload = BatchIssue(
            template_id="t",
            credentials=[
                {"individual_email": "a@example.com", "credential_data": {"n": "A"}},
                BatchCredential(individual_email="b@example.com", credential_data={"n": "B"}),
            ],
        )
        assert payload.send_notifications is True
        assert [row.individual_email for row in payload.credentials] == [
            "a@example.com",
            "b@example.com",
        ]

    def test_row_missing_email_rejected(self):
        """Each row needs an email."""
        with pytest.raises(PydanticValidationError):
            BatchIssue(template_id="t", credentials=[{"credential_data": {}}])


class TestTemplateCreate:
    """Tests for TemplateCreate model."""

    def test_schema_alias(self):
        """Schema should be accepted and dumped as 'schema'."""
        payload = TemplateCreate(
            name="Diploma",
            description="Bachelor diploma",
            credential_type="diploma",
            schema=[{"name": "student_name", "type": "text"}],
        )
        dumped = payload.model_dump(by_alias=True)
        assert dumped["schema"] == [{"name": "student_name", "type": "text"}]
        assert dumped["version"] == "1.0"
        assert "template_schema" not in dumped


class TestTeamModels:
    """Tests for team models."""

    def test_invite_defaults(self):
        """Should default to the least privileged role."""
        payload = TeamInvite(email="new@uni.edu")
        assert payload.role == "issuer"
        assert payload.send_email is True
        assert payload.add_directly is False

    def test_invite_rejects_unknown_role(self):
        """Only owner, admin and issuer are valid roles."""
        with pytest.raises(PydanticValidationError):
            TeamInvite(email="new@uni.edu", role="superuser")

    def test_role_update(self):
        """Should accept a known role."""
        assert RoleUpdate(role="admin").role == "admin"


class TestBuildPayload:
    """Tests for build_payload()."""

    def test_returns_model(self):
        """Should return the validated model."""
        payload = build_payload(TeamInvite, email="new@uni.edu", role="admin")
        assert isinstance(payload, TeamInvite)
        assert payload.role == "admin"

    def test_wraps_validation_error(self):
        """Should raise ParameterError chained to the pydantic error."""
        with pytest.raises(ParameterError) as exc_info:
            build_payload(TeamInvite, email="")
        assert "TeamInvite" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)


class TestPackageExports:
    """Tests for the models re-exported at package level."""

    @pytest.mark.parametrize(
        "name",
        [
            "BatchCredential",
            "BatchIssue",
            "ClaimLinkResend",
            "CredentialIssue",
            "CredentialListQuery",
            "Role",
            "RoleUpdate",
            "TeamInvite",
            "TemplateCreate",
        ],
    )
    def test_model_exported(self, name):
        """Every request model should be importable from docwal directly."""
        assert name in docwal.__all__
        assert getattr(docwal, name) is getattr(models, name)
