"""
Async client for the Talent AI recruiting backend.
"""

from .client import TalentClient
from .core.exceptions import ApiError
from .utils.transformers import transform_candidate_to_frontend, transform_job_to_frontend

__all__ = [
    "TalentClient",
    "ApiError",
    "transform_job_to_frontend",
    "transform_candidate_to_frontend",
]
