"""
Applications resource.

Plain reads and generic field updates only. Pipeline transitions (stage
moves, rejection, screening, comments) go through
``talent_client.services.application_service.ApplicationService`` so that
each one is an explicit, audit-tracked call.
"""

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource


class ApplicationResource(BaseResource):
    update_method = "PATCH"

    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/applications")

    async def get_by_job(self, job_id: str) -> list:
        return await self.get_all(params={"job_id": job_id})
