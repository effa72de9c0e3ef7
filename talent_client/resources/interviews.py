"""
Interviews resource.
"""

from typing import Any, Dict, Optional

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource, build_query


class InterviewResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/interviews")

    async def find(
        self,
        application_id: Optional[str] = None,
        candidate_id: Optional[str] = None,
        status: Optional[str] = None,
        company_id: Optional[str] = None,
    ) -> list:
        return await self.get_all(
            params=build_query(
                applicationId=application_id,
                candidateId=candidate_id,
                status=status,
                companyId=company_id,
            )
        )

    async def get_by_application(self, application_id: str) -> Dict[str, Any]:
        """
        Interviews of one application as ``{success, data}``.

        ``success`` is only False when the backend explicitly says so;
        ``data`` defaults to an empty list.
        """
        response = await self.transport.request(f"/interviews/by-application/{application_id}")
        return {
            "success": response.get("success") is not False,
            "data": response.get("data") or [],
        }

    async def update_status(
        self,
        id: str,
        status: str,
        feedback: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> Any:
        response = await self.transport.request(
            f"/interviews/{id}/status",
            method="PATCH",
            json={"status": status, "feedback": feedback, "rating": rating},
        )
        return response.get("data")
