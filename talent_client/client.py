"""
Entry point bundling every resource and service over one HTTP client.

Usage:
    from talent_client import TalentClient

    async with TalentClient(default_actor="jane@acme.io") as client:
        jobs = await client.jobs.get_all()
        await client.lifecycle.move_to_stage(app_id, "interview", notes="Strong portfolio")
        stats = await client.stats.get_dashboard_stats()
"""

from __future__ import annotations
from typing import Optional
import logging
import httpx

from talent_client.core.config import Settings, settings as default_settings
from talent_client.core.http import ApiTransport
from talent_client.resources.ai import AIResource
from talent_client.resources.applications import ApplicationResource
from talent_client.resources.assignments import AssignmentTemplateResource, CandidateAssignmentResource
from talent_client.resources.candidates import CandidateResource
from talent_client.resources.email import EmailResource
from talent_client.resources.interviews import InterviewResource
from talent_client.resources.jobs import JobResource
from talent_client.resources.lookups import (
    DepartmentResource,
    LookupResource,
    RoleTypeResource,
    WorkSetupResource,
)
from talent_client.resources.roles import RoleResource
from talent_client.resources.tasks import TaskResource
from talent_client.resources.upload import UploadResource
from talent_client.resources.users import UserResource
from talent_client.services.application_service import ApplicationService
from talent_client.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)


class TalentClient:
    """
    Client for the recruiting backend.

    Configuration is injected at construction: pass ``settings`` (defaults
    to the module-level settings read from the environment at import), or
    override ``base_url`` / ``default_actor`` directly.

    When ``http_client`` is given the caller owns it and ``aclose`` leaves
    it open; otherwise the client creates one and closes it on exit.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        base_url: Optional[str] = None,
        default_actor: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or default_settings
        self.base_url = base_url or self.settings.api_base_url

        self._owns_http_client = http_client is None
        if http_client is None:
            client_kwargs = {}
            if self.settings.http_timeout is not None:
                client_kwargs["timeout"] = self.settings.http_timeout
            http_client = httpx.AsyncClient(**client_kwargs)
        self.http_client = http_client

        self.transport = ApiTransport(self.base_url, self.http_client)

        # Resources
        self.jobs = JobResource(self.transport)
        self.candidates = CandidateResource(self.transport)
        self.applications = ApplicationResource(self.transport)
        self.ai = AIResource(self.transport)
        self.upload = UploadResource(self.transport, self.settings.default_company_id)
        self.lookups = LookupResource(self.transport)
        self.departments = DepartmentResource(self.transport)
        self.role_types = RoleTypeResource(self.transport)
        self.work_setups = WorkSetupResource(self.transport)
        self.users = UserResource(self.transport)
        self.tasks = TaskResource(self.transport)
        self.assignment_templates = AssignmentTemplateResource(self.transport)
        self.candidate_assignments = CandidateAssignmentResource(self.transport)
        self.interviews = InterviewResource(self.transport)
        self.email = EmailResource(self.transport)
        self.roles = RoleResource(self.transport)

        # Services
        self.lifecycle = ApplicationService(
            self.transport,
            default_actor=default_actor or self.settings.default_actor,
        )
        self.stats = StatisticsService(self.jobs, self.candidates, self.applications)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()
            logger.debug("HTTP client closed")

    async def __aenter__(self) -> TalentClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
