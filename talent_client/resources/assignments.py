"""
Assignment templates and per-candidate assignments.

Templates are reusable test definitions; candidate assignments are the
instances sent to one application, with a submission status and an
optional AI analysis of the submission.
"""

from typing import Any, Dict, Mapping, Optional

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource, build_query


class AssignmentTemplateResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/assignments/templates")

    async def find(
        self,
        company_id: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> list:
        return await self.get_all(params=build_query(companyId=company_id, jobType=job_type))


class CandidateAssignmentResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/assignments/candidates")

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

    async def send_to_candidate(self, assignment: Mapping[str, Any]) -> Any:
        return await self.create(assignment)

    async def update_status(self, id: str, status_data: Mapping[str, Any]) -> Any:
        response = await self.transport.request(
            f"{self.path}/{id}/status", method="PATCH", json=dict(status_data)
        )
        return response.get("data")

    async def get_by_application(self, application_id: str) -> list:
        response = await self.transport.request(f"/assignments/by-application/{application_id}")
        return response.get("data") or []

    async def analyze_submission(self, id: str) -> Dict[str, Any]:
        """Ask the backend to run AI analysis on a submitted assignment."""
        return await self.transport.request(
            f"/assignments/candidate/{id}/analyze", method="POST"
        )

    async def get_analysis(self, id: str) -> Dict[str, Any]:
        return await self.transport.request(f"/assignments/candidate/{id}/analysis")
