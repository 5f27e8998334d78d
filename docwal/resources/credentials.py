"""Credential issuance and management endpoints."""

import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from docwal._internal.paths import path_segment
from docwal.models import (
    DEFAULT_BATCH_FILENAME,
    DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS,
    DEFAULT_DOCUMENT_FILENAME,
    DEFAULT_LIST_LIMIT,
    BatchCredential,
    BatchIssue,
    ClaimLinkResend,
    CredentialIssue,
    CredentialListQuery,
    FileContent,
    build_payload,
)

if TYPE_CHECKING:
    from docwal.client import DocWalClient


class CredentialsResource:
    """Issue, list, inspect, revoke and download credentials."""

    def __init__(self, client: "DocWalClient") -> None:
        self._client = client

    def issue(
        self,
        template_id: str,
        individual_email: str,
        credential_data: Mapping[str, Any],
        *,
        document_file: FileContent | None = None,
        document_filename: str = DEFAULT_DOCUMENT_FILENAME,
        expires_at: datetime | str | None = None,
        claim_token_expires_hours: int = DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS,
    ) -> dict[str, Any]:
        """Issue a single credential.

        A document file cannot travel in a JSON body, so when one is attached
        the request is sent as multipart and ``credential_data`` is encoded as
        a JSON string field. Otherwise the data is sent as a nested JSON object.

        Args:
            template_id: Template to issue against.
            individual_email: Recipient's email address.
            credential_data: Credential field values keyed by field name.
            document_file: Optional PDF to attach, as bytes or a binary file.
            document_filename: Filename reported for the attachment.
            expires_at: Optional credential expiration (ISO string or datetime).
            claim_token_expires_hours: Claim link lifetime (default: 720, 30 days).

        Returns:
            Response with doc_id, document_hash, status and claim_token.

        Raises:
            ParameterError: If a required value is missing.
        """
        payload = build_payload(
            CredentialIssue,
            template_id=template_id,
            individual_email=individual_email,
            credential_data=credential_data,
            expires_at=expires_at,
            claim_token_expires_hours=claim_token_expires_hours,
        )
        body = payload.model_dump(mode="json", exclude_none=True)

        if document_file is None:
            return self._client.request("POST", "/credentials/issue/", json=body)

        fields = {
            "template_id": body["template_id"],
            "individual_email": body["individual_email"],
            "credential_data": json.dumps(body["credential_data"]),
            "claim_token_expires_hours": str(body["claim_token_expires_hours"]),
        }
        if "expires_at" in body:
            fields["expires_at"] = body["expires_at"]

        return self._client.request(
            "POST",
            "/credentials/issue/",
            data=fields,
            files={"document_file": (document_filename, document_file, "application/pdf")},
        )

    def batch_issue(
        self,
        template_id: str,
        credentials: Sequence[BatchCredential | Mapping[str, Any]],
        send_notifications: bool = True,
    ) -> dict[str, Any]:
        """Issue credentials to many recipients in one request.

        Args:
            template_id: Template to issue against.
            credentials: Recipient rows, each with individual_email and
                credential_data (BatchCredential or plain mapping).
            send_notifications: Send claim emails to recipients.

        Returns:
            Response with total_rows, success_count, failure_count and results.

        Raises:
            ParameterError: If a row is missing a required value.
        """
        payload = build_payload(
            BatchIssue,
            template_id=template_id,
            credentials=list(credentials),
            send_notifications=send_notifications,
        )
        return self._client.request(
            "POST", "/credentials/batch/", json=payload.model_dump(mode="json")
        )

    def batch_upload(
        self,
        template_id: str,
        file: FileContent,
        send_notifications: bool = True,
        *,
        filename: str = DEFAULT_BATCH_FILENAME,
    ) -> dict[str, Any]:
        """Issue credentials from a ZIP archive.

        The archive holds a credentials.csv (or JSON) manifest and a
        documents/ folder with the referenced PDFs.

        Args:
            template_id: Template to issue against.
            file: ZIP archive as bytes or a binary file.
            send_notifications: Send claim emails to recipients.
            filename: Filename reported for the archive.

        Returns:
            Response with total_rows, success_count, failure_count and results.
        """
        return self._client.request(
            "POST",
            "/credentials/batch-upload/",
            data={
                "template_id": template_id,
                "send_notifications": "true" if send_notifications else "false",
            },
            files={"file": (filename, file, "application/zip")},
        )

    def list(self, limit: int = DEFAULT_LIST_LIMIT, offset: int = 0) -> Any:
        """List credentials issued by the institution.

        Args:
            limit: Number of results per page.
            offset: Pagination offset.

        Raises:
            ParameterError: If limit is below 1 or offset is negative.
        """
        query = build_payload(CredentialListQuery, limit=limit, offset=offset)
        return self._client.request("GET", "/credentials/", params=query.model_dump())

    def get(self, doc_id: str) -> dict[str, Any]:
        """Get credential details by document ID."""
        return self._client.request("GET", f"/credentials/{path_segment(doc_id)}/")

    def revoke(self, doc_id: str, reason: str) -> dict[str, Any]:
        """Revoke a credential.

        Args:
            doc_id: Credential document ID.
            reason: Reason for revocation, shown to verifiers.
        """
        return self._client.request(
            "POST",
            f"/credentials/{path_segment(doc_id)}/revoke/",
            json={"reason": reason},
        )

    def resend_claim_link(
        self,
        doc_id: str,
        claim_token_expires_hours: int = DEFAULT_CLAIM_TOKEN_EXPIRES_HOURS,
    ) -> dict[str, Any]:
        """Resend the claim link email with a fresh token.

        Args:
            doc_id: Credential document ID.
            claim_token_expires_hours: New claim link lifetime (default: 720).

        Returns:
            Response with message, claim_token, claim_token_expires and
            recipient_email.

        Raises:
            ParameterError: If the claim link lifetime is not a positive integer.
        """
        payload = build_payload(
            ClaimLinkResend, claim_token_expires_hours=claim_token_expires_hours
        )
        return self._client.request(
            "POST",
            f"/credentials/{path_segment(doc_id)}/resend-claim/",
            json=payload.model_dump(mode="json"),
        )

    def download(self, doc_id: str) -> bytes:
        """Download the credential document (PDF) as raw bytes."""
        return self._client.request(
            "GET", f"/credentials/{path_segment(doc_id)}/download/", raw=True
        )
