"""
Job openings resource.
"""

from typing import Any

from talent_client.core.http import ApiTransport
from talent_client.resources.base import BaseResource


class JobResource(BaseResource):
    def __init__(self, transport: ApiTransport):
        super().__init__(transport, "/jobs")

    async def toggle_active(self, id: str, is_active: bool) -> Any:
        """Open or close a job for new applications."""
        return await self.update(id, {"is_active": is_active})
