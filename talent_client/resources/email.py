"""
Outbound email endpoints.
"""

from typing import Any, Dict

from talent_client.core.http import ApiTransport


class EmailResource:
    def __init__(self, transport: ApiTransport):
        self.transport = transport

    async def send_interview_with_calendar(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Send an interview invitation with a calendar invite attached."""
        return await self.transport.request(
            "/email/interview-with-calendar", method="POST", json=params
        )
