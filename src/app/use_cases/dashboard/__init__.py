"""Dashboard and analytics use cases."""

from .get_dashboard_stats_use_case import GetDashboardStatsUseCase, format_idr
from .get_review_summary_use_case import GetReviewSummaryUseCase
from .dtos import DashboardStatsResponse, ReviewInfo, ReviewSummaryResponse

__all__ = [
    "GetDashboardStatsUseCase",
    "GetReviewSummaryUseCase",
    "format_idr",
    "DashboardStatsResponse",
    "ReviewInfo",
    "ReviewSummaryResponse",
]
