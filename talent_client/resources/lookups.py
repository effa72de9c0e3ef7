"""
Lookup tables: departments, role types and work setups.
"""

from typing import Any, Dict

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource

EMPTY_LOOKUPS = {"departments": [], "roleTypes": [], "workSetups": []}


class LookupResource:
    def __init__(self, transport: ApiTransport):
        self.transport = transport

    async def get_all(self) -> Dict[str, Any]:
        response = await self.transport.request("/lookups")
        return response.get("data") or {key: [] for key in EMPTY_LOOKUPS}


class NamedLookupResource(BaseResource):
    """A lookup table whose entries are created from a bare name."""

    async def create(self, name: str) -> Any:
        return await super().create({"name": name})


class DepartmentResource(NamedLookupResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/departments")


class RoleTypeResource(NamedLookupResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/role-types")


class WorkSetupResource(NamedLookupResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/work-setups")
