from .application_service import ApplicationService
from .statistics_service import StatisticsService

__all__ = [
    "ApplicationService",
    "StatisticsService"
]
