"""
Dashboard statistics schemas.
"""

from pydantic import BaseModel, Field
from typing import Dict, List


class DashboardStats(BaseModel):
    """
    Summary metrics for the recruiting dashboard.

    All counts are computed client-side from the jobs, candidates and
    applications lists.
    """
    active_jobs: int = Field(default=0, alias="activeJobs")
    total_candidates: int = Field(default=0, alias="totalCandidates")
    total_applications: int = Field(default=0, alias="totalApplications")
    hot_applicants: int = Field(default=0, alias="hotApplicants")
    avg_ai_score: int = Field(
        default=0,
        alias="avgAIScore",
        description="Rounded mean of non-null AI scores, 0 when none",
    )

    model_config = {"populate_by_name": True}


class DashboardStatsResult(BaseModel):
    """
    Outcome of a dashboard collection run.

    ``ok`` is False when at least one source read failed; ``stats`` is then
    all zeros and ``failed_sources`` names the reads that failed.
    """
    stats: DashboardStats
    ok: bool = True
    failed_sources: List[str] = Field(default_factory=list)
    errors: Dict[str, str] = Field(default_factory=dict)
