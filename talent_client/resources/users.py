"""
Users / admins resource.
"""

from typing import Any, Dict, Optional

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource, build_query


class UserResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/users")

    async def find(
        self,
        company_id: Optional[str] = None,
        role: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list:
        return await self.get_all(
            params=build_query(companyId=company_id, role=role, status=status)
        )

    async def toggle_status(self, id: str, status: str) -> Any:
        response = await self.transport.request(
            f"/users/{id}/status", method="PATCH", json={"status": status}
        )
        return response.get("data")

    async def login(self, email: str, password: str) -> Any:
        response = await self.transport.request(
            "/users/login",
            method="POST",
            json={"email": email, "password": password},
        )
        return response.get("data")

    async def seed_admin(self) -> Dict[str, Any]:
        """Create the default super admin on an empty install."""
        return await self.transport.request("/users/seed", method="POST")
