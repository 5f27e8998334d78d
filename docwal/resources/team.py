"""Institution team management endpoints."""

from typing import TYPE_CHECKING, Any

from docwal._internal.paths import path_segment
from docwal.models import Role, RoleUpdate, TeamInvite, build_payload

if TYPE_CHECKING:
    from docwal.client import DocWalClient


class TeamResource:
    """Manage team members and pending invitations."""

    def __init__(self, client: "DocWalClient") -> None:
        self._client = client

    def list(self) -> dict[str, Any]:
        """List team members and pending invitations.

        Returns:
            Response with members, pending_invitations and stats.
        """
        return self._client.request("GET", "/institutions/team/")

    def check_email(self, email: str) -> dict[str, Any]:
        """Check whether an email address can be invited.

        Returns:
            Validation result with a recommendation.
        """
        return self._client.request(
            "POST", "/institutions/team/check-email/", json={"email": email}
        )

    def invite(
        self,
        email: str,
        role: Role = "issuer",
        send_email: bool = True,
        add_directly: bool = False,
    ) -> dict[str, Any]:
        """Invite a team member.

        Args:
            email: Email address; must use the institution's domain.
            role: One of "owner", "admin" or "issuer" (default: "issuer").
            send_email: Send the invitation email.
            add_directly: Add the user at once if they already have an account.

        Returns:
            Invitation or member details.

        Raises:
            ParameterError: If the email is empty or the role is unknown.
        """
        payload = build_payload(
            TeamInvite,
            email=email,
            role=role,
            send_email=send_email,
            add_directly=add_directly,
        )
        return self._client.request(
            "POST", "/institutions/team/invite/", json=payload.model_dump(mode="json")
        )

    def update_role(self, member_id: str, role: Role) -> dict[str, Any]:
        """Change a team member's role."""
        payload = build_payload(RoleUpdate, role=role)
        return self._client.request(
            "PATCH",
            f"/institutions/team/members/{path_segment(member_id)}/role/",
            json=payload.model_dump(mode="json"),
        )

    def deactivate(self, member_id: str, reason: str | None = None) -> dict[str, Any]:
        """Deactivate a team member (soft delete).

        Args:
            member_id: Team member ID.
            reason: Optional reason, sent only when given.
        """
        body: dict[str, Any] = {}
        if reason is not None:
            body["reason"] = reason
        return self._client.request(
            "POST",
            f"/institutions/team/members/{path_segment(member_id)}/deactivate/",
            json=body,
        )

    def reactivate(self, member_id: str) -> dict[str, Any]:
        """Reactivate a deactivated team member."""
        return self._client.request(
            "POST", f"/institutions/team/members/{path_segment(member_id)}/reactivate/"
        )

    def remove(self, member_id: str) -> dict[str, Any]:
        """Remove a team member (hard delete)."""
        return self._client.request(
            "DELETE", f"/institutions/team/members/{path_segment(member_id)}/remove/"
        )
