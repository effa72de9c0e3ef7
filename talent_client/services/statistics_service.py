"""
Statistics service for the recruiting dashboard.

The backend has no dashboard endpoint; the summary metrics are folded
client-side from the full jobs, candidates and applications lists, which
are read concurrently.
"""

from __future__ import annotations
from typing import Any, Iterable, Mapping
import asyncio
import logging
import math

from talent_client.resources.applications import ApplicationResource
from talent_client.resources.candidates import CandidateResource
from talent_client.resources.jobs import JobResource
from talent_client.schemas.statistics import DashboardStats, DashboardStatsResult

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positives.

    Example:
        >>> round_half_up(84.5)
        85
        >>> round_half_up(84.4)
        84
    """
    return math.floor(value + 0.5)


class StatisticsService:
    """
    Service for generating dashboard statistics.

    ``collect_dashboard_stats`` reports which reads failed;
    ``get_dashboard_stats`` is the lenient variant for the dashboard UI
    that shows zeros instead of an error state.
    """

    SOURCES = ("jobs", "candidates", "applications")

    def __init__(
        self,
        job_resource: JobResource,
        candidate_resource: CandidateResource,
        application_resource: ApplicationResource
    ):
        """
        Initialize service with resources.

        Args:
            job_resource: JobResource instance
            candidate_resource: CandidateResource instance
            application_resource: ApplicationResource instance
        """
        self.job_resource = job_resource
        self.candidate_resource = candidate_resource
        self.application_resource = application_resource

    @staticmethod
    def compute_dashboard_stats(
        jobs: Iterable[Mapping[str, Any]],
        candidates: Iterable[Mapping[str, Any]],
        applications: Iterable[Mapping[str, Any]],
    ) -> DashboardStats:
        """
        Fold raw records into dashboard metrics.

        Only applications with a non-null AI score count towards the
        average; with none scored the average is 0.

        Example:
            stats = StatisticsService.compute_dashboard_stats(
                jobs=[{"is_active": True}, {"is_active": False}],
                candidates=[],
                applications=[{"ai_score": 80}, {"ai_score": None}, {"ai_score": 90}],
            )
            stats.active_jobs   # 1
            stats.avg_ai_score  # 85
        """
        jobs = list(jobs)
        applications = list(applications)

        scores = [a["ai_score"] for a in applications if a.get("ai_score") is not None]
        avg_score = round_half_up(sum(scores) / len(scores)) if scores else 0

        return DashboardStats(
            active_jobs=sum(1 for j in jobs if j.get("is_active")),
            total_candidates=len(list(candidates)),
            total_applications=len(applications),
            hot_applicants=sum(1 for a in applications if a.get("is_hot_applicant")),
            avg_ai_score=avg_score,
        )

    async def collect_dashboard_stats(self) -> DashboardStatsResult:
        """
        Read jobs, candidates and applications concurrently and fold them.

        The three reads are independent; the fold starts once all of them
        have finished.

        Returns:
            DashboardStatsResult. When any read failed, ``ok`` is False,
            ``stats`` is all zeros and ``failed_sources`` lists the reads
            that failed (in "jobs", "candidates", "applications" order).
        """
        results = await asyncio.gather(
            self.job_resource.get_all(),
            self.candidate_resource.get_all(),
            self.application_resource.get_all(),
            return_exceptions=True,
        )

        errors = {}
        for source, result in zip(self.SOURCES, results):
            if isinstance(result, Exception):
                errors[source] = str(result) or type(result).__name__
            elif isinstance(result, BaseException):
                # Cancellation and interpreter exits are not read failures
                raise result

        if errors:
            logger.error(f"Dashboard stats unavailable, failed sources: {errors}")
            return DashboardStatsResult(
                stats=DashboardStats(),
                ok=False,
                failed_sources=list(errors),
                errors=errors,
            )

        jobs, candidates, applications = results
        return DashboardStatsResult(
            stats=self.compute_dashboard_stats(jobs, candidates, applications)
        )

    async def get_dashboard_stats(self) -> DashboardStats:
        """
        Dashboard metrics, degraded to all zeros on any failure.

        Never raises for backend or data errors; the failure is logged.
        """
        try:
            result = await self.collect_dashboard_stats()
        except Exception as e:
            logger.error(f"Error computing dashboard stats: {e}")
            return DashboardStats()
        return result.stats
