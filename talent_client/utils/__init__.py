# Utilities package
from .status_mapper import stage_display_name, STAGE_NAMES
from .transformers import transform_job_to_frontend, transform_candidate_to_frontend

__all__ = [
    "stage_display_name",
    "STAGE_NAMES",
    "transform_job_to_frontend",
    "transform_candidate_to_frontend",
]
