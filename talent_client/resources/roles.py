"""
RBAC roles resource.
"""

from typing import Any, Dict

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource


class RoleResource(BaseResource):
    update_method = "PATCH"

    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/roles")

    async def get_permissions(self) -> list:
        response = await self.transport.request("/roles/permissions")
        return response.get("data") or []

    async def seed(self) -> Dict[str, Any]:
        return await self.transport.request("/roles/seed", method="POST")
