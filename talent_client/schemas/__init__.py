from .envelope import ApiEnvelope
from .job import JobView
from .application import (
    StageHistoryEntry,
    CommentView,
    CandidateView,
    CommentCreate,
    ScreeningSchedule,
    JourneyEvent,
    CurrentStage,
    ApplicationJourney
)
from .statistics import DashboardStats, DashboardStatsResult

__all__ = [
    "ApiEnvelope",
    "JobView",
    "StageHistoryEntry",
    "CommentView",
    "CandidateView",
    "CommentCreate",
    "ScreeningSchedule",
    "JourneyEvent",
    "CurrentStage",
    "ApplicationJourney",
    "DashboardStats",
    "DashboardStatsResult"
]
