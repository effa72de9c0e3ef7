"""
AI scoring and generation endpoints.

Scores are computed by the backend; the client only triggers and reads
them. Scoring calls return the full envelope because the backend puts
the score next to ``data`` rather than inside it.
"""

from typing import Any, Dict, List, Optional

from talent_client.core.http import ApiTransport


class AIResource:
    def __init__(self, transport: ApiTransport):
        self.transport = transport

    async def score_resume(
        self,
        resume_text: str,
        job_id: str,
        application_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.transport.request(
            "/ai/score",
            method="POST",
            json={
                "resumeText": resume_text,
                "jobId": job_id,
                "applicationId": application_id,
            },
        )

    async def batch_score(self, application_ids: List[str]) -> Dict[str, Any]:
        return await self.transport.request(
            "/ai/batch-score",
            method="POST",
            json={"applicationIds": application_ids},
        )

    async def generate_job_description(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.transport.request(
            "/ai/generate-job-description", method="POST", json=params
        )

    async def get_recommendations(self, user_id: Optional[str] = None) -> Any:
        """Insights for the tasks page, optionally scoped to one user."""
        response = await self.transport.request(
            "/ai/recommendations",
            params={"userId": user_id} if user_id else None,
        )
        return response.get("data")
