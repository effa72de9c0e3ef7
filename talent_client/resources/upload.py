"""
File upload resource.

Uploads are multipart form submissions, so they bypass the JSON content
headers. Each call has its own fallback error message for responses
without an ``error`` field.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from talent_client.core.http import ApiTransport

# (filename, content, content_type) as accepted by httpx
FileField = Any


class UploadResource:
    def __init__(self, transport: ApiTransport, default_company_id: str):
        self.transport = transport
        self.default_company_id = default_company_id

    async def upload_resume(
        self,
        file: FileField,
        company_id: str,
        candidate_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Upload a resume and let the backend extract its text.

        Args:
            file: File content or an httpx file tuple
            company_id: Owning company
            candidate_id: Candidate to attach the resume to, if known

        Returns:
            The full response envelope (resume URL and extracted text)
        """
        data = {"companyId": company_id}
        if candidate_id:
            data["candidateId"] = candidate_id

        return await self.transport.upload(
            "/upload/resume",
            files={"resume": file},
            data=data,
            fallback_error="Failed to upload resume",
        )

    async def upload_file(
        self,
        file: FileField,
        company_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Upload a general file, e.g. an assignment attachment."""
        return await self.transport.upload(
            "/upload/file",
            files={"file": file},
            data={"companyId": company_id or self.default_company_id},
            fallback_error="Failed to upload file",
        )

    async def get_signed_url(self, key: str) -> Optional[str]:
        # The key is not escaped: the backend matches the full path, slashes included
        response = await self.transport.get_raw(
            f"/upload/signed-url/{key}",
            fallback_error="Failed to get signed URL",
        )
        return response.get("signedUrl")
