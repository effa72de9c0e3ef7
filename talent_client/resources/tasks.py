"""
Tasks resource: assignment-style work items tied to an application.
"""

from typing import Any, Optional

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource, build_query


class TaskResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/tasks")

    async def find(
        self,
        company_id: Optional[str] = None,
        assigned_to: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> list:
        return await self.get_all(
            params=build_query(
                companyId=company_id,
                assignedTo=assigned_to,
                status=status,
                priority=priority,
            )
        )

    async def get_by_application(self, application_id: str) -> list:
        response = await self.transport.request(f"/tasks/by-application/{application_id}")
        return response.get("data") or []

    async def get_by_user(self, user_name: str) -> list:
        response = await self.transport.request(f"/tasks/by-user/{user_name}")
        return response.get("data") or []

    async def update_status(
        self,
        id: str,
        status: str,
        completed_by: Optional[str] = None,
    ) -> Any:
        response = await self.transport.request(
            f"/tasks/{id}/status",
            method="PATCH",
            json={"status": status, "completed_by": completed_by},
        )
        return response.get("data")
