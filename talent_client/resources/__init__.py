from .base import BaseResource
from .jobs import JobResource
from .candidates import CandidateResource
from .applications import ApplicationResource
from .ai import AIResource
from .upload import UploadResource
from .lookups import LookupResource, DepartmentResource, RoleTypeResource, WorkSetupResource
from .users import UserResource
from .tasks import TaskResource
from .assignments import AssignmentTemplateResource, CandidateAssignmentResource
from .interviews import InterviewResource
from .email import EmailResource
from .roles import RoleResource

__all__ = [
    "BaseResource",
    "JobResource",
    "CandidateResource",
    "ApplicationResource",
    "AIResource",
    "UploadResource",
    "LookupResource",
    "DepartmentResource",
    "RoleTypeResource",
    "WorkSetupResource",
    "UserResource",
    "TaskResource",
    "AssignmentTemplateResource",
    "CandidateAssignmentResource",
    "InterviewResource",
    "EmailResource",
    "RoleResource"
]
