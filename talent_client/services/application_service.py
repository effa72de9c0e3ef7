"""
Application lifecycle service.

This module moves a candidate's application through the recruiting
pipeline: stage transitions, rejection, screening calls, comments and
the journey timeline. Each transition is a named call with its own
endpoint so the backend can validate and audit it separately, instead
of callers PUTting arbitrary fields.

Nothing here is retried or applied optimistically: the backend's answer
is the new state, and its validation errors reach the caller verbatim as
``ApiError``.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional, Union
import logging

from talent_client.core.http import ApiTransport
from talent_client.resources.base import as_payload
from talent_client.schemas.application import ApplicationJourney, CommentCreate, ScreeningSchedule
from talent_client.schemas.envelope import ApiEnvelope

logger = logging.getLogger(__name__)

# Actor recorded when neither the caller nor the session names one
DEFAULT_ACTOR = "Admin"

DEFAULT_ACTION = "stage_change"


class ApplicationService:
    """
    Service for application lifecycle transitions.

    Audit-tracked calls (``reject``, ``move_to_stage``, comments) record
    an actor. It is resolved as: the explicit argument, else the
    ``default_actor`` this service was built with (normally the logged-in
    user), else "Admin".
    """

    def __init__(
        self,
        transport: ApiTransport,
        default_actor: Optional[str] = None
    ):
        """
        Initialize service with a transport.

        Args:
            transport: Shared ApiTransport instance
            default_actor: Acting user for audit entries when a call omits one
        """
        self.transport = transport
        self.default_actor = default_actor

    def resolve_actor(self, actor: Optional[str] = None) -> str:
        return actor or self.default_actor or DEFAULT_ACTOR

    async def update_stage(self, application_id: str, stage_id: str) -> Any:
        """
        Set the application's pipeline stage reference.

        The backend records any history for this call itself; use
        ``move_to_stage`` for an explicitly audit-tracked move.
        """
        response = await self.transport.request(
            f"/applications/{application_id}/stage",
            method="PUT",
            json={"stage_id": stage_id},
        )
        return response.get("data")

    async def update_status(self, application_id: str, status: str) -> Any:
        response = await self.transport.request(
            f"/applications/{application_id}",
            method="PUT",
            json={"status": status},
        )
        return response.get("data")

    async def reject(
        self,
        application_id: str,
        reason: str,
        rejected_by: Optional[str] = None,
        send_email: bool = False,
    ) -> Any:
        """
        Reject an application.

        Terminal transition: the backend sets stage and status to
        "rejected", stores the reason and date, and appends a history
        entry and a rejection comment.

        Args:
            application_id: Application to reject
            reason: Rejection reason (required, non-blank)
            rejected_by: Acting user; see ``resolve_actor``
            send_email: Ask the backend to notify the candidate

        Returns:
            The updated application record

        Raises:
            ValueError: If reason is empty (nothing is sent)
            ApiError: If the backend refuses the rejection

        Example:
            app = await service.reject(app_id, "Position filled", rejected_by="jane")
            assert app["status"] == "rejected"
        """
        if not reason or not reason.strip():
            raise ValueError("Rejection reason is required")

        actor = self.resolve_actor(rejected_by)
        body = {"reason": reason, "rejectedBy": actor}
        if send_email:
            body["sendEmail"] = True

        response = await self.transport.request(
            f"/applications/{application_id}/reject",
            method="POST",
            json=body,
        )

        logger.info(f"Application {application_id} rejected by {actor}")
        return response.get("data")

    async def move_to_stage(
        self,
        application_id: str,
        stage: str,
        moved_by: Optional[str] = None,
        notes: Optional[str] = None,
        action: str = DEFAULT_ACTION,
    ) -> Any:
        """
        Move an application to another stage and append a history entry.

        Args:
            application_id: Application to move
            stage: Target stage, e.g. "interview"
            moved_by: Acting user; see ``resolve_actor``
            notes: Optional note stored on the history entry
            action: Kind of transition, e.g. "stage_change", "hired",
                "assignment_sent", "interview_scheduled"

        Returns:
            The updated application record, history included

        Raises:
            ValueError: If stage is empty (nothing is sent)
        """
        if not stage:
            raise ValueError("Stage is required")

        actor = self.resolve_actor(moved_by)
        response = await self.transport.request(
            f"/applications/{application_id}/move-to-stage",
            method="POST",
            json={
                "stage": stage,
                "movedBy": actor,
                "notes": notes,
                "action": action or DEFAULT_ACTION,
            },
        )

        logger.info(f"Application {application_id} moved to {stage} by {actor}")
        return response.get("data")

    async def add_comment(
        self,
        application_id: str,
        comment: Union[CommentCreate, Mapping[str, Any]],
    ) -> Any:
        """
        Append a comment to the application's comment log.

        Only the new comment is sent; existing comments are never
        replaced or reordered.

        Raises:
            pydantic.ValidationError: If the comment text is blank
        """
        if not isinstance(comment, CommentCreate):
            comment = CommentCreate.model_validate(comment)

        body = comment.model_dump(exclude_none=True)
        if "author" not in body and self.default_actor:
            body["author"] = self.default_actor

        response = await self.transport.request(
            f"/applications/{application_id}/comment",
            method="POST",
            json=body,
        )
        return response.get("data")

    async def toggle_hot_applicant(self, application_id: str, is_hot: bool) -> Any:
        response = await self.transport.request(
            f"/applications/{application_id}",
            method="PATCH",
            json={"is_hot_applicant": is_hot},
        )
        return response.get("data")

    async def schedule_screening(
        self,
        application_id: str,
        screening: Union[ScreeningSchedule, Mapping[str, Any]],
    ) -> Any:
        """
        Schedule a screening call.

        The backend stores the screening fields, moves the application to
        the screening stage and emails the invitation as a side effect.

        Args:
            application_id: Application to schedule
            screening: ScreeningSchedule, or a mapping already using the
                backend's camelCase keys

        Returns:
            The updated application record
        """
        response = await self.transport.request(
            f"/applications/{application_id}/schedule-screening",
            method="POST",
            json=as_payload(screening),
        )

        logger.info(f"Screening call scheduled for application {application_id}")
        return response.get("data")

    async def get_journey(self, application_id: str) -> ApplicationJourney:
        """Read the ordered timeline of one application. Read-only."""
        response = await self.transport.request(f"/applications/{application_id}/journey")
        return ApplicationJourney.model_validate(response.get("data") or {})

    async def public_apply(self, application: Mapping[str, Any]) -> ApiEnvelope:
        """
        Submit an application through the public, unauthenticated form.

        Returns the whole envelope so the caller can branch on
        ``success`` and show ``message``.
        """
        response = await self.transport.request(
            "/applications/public-apply",
            method="POST",
            json=dict(application),
        )
        return ApiEnvelope.model_validate(response)
