"""
Dashboard Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.tenants.dtos import TenantSummary


class DashboardStatsResponse(BaseModel):
    """Headline numbers for the operator dashboard"""

    active_tenants: int  # number of barbershops
    waiting_approval: int
    total_users: int
    revenue: str
    revenue_amount: float
    transactions: int
    recent_tenants: List[TenantSummary]


class ReviewInfo(BaseModel):
    id: str
    user_name: str
    user_email: str
    rating: int
    feedback: str
    platform: str
    created_at: Optional[str] = None
    sentiment: Optional[str] = None
    sentiment_confidence: Optional[float] = None


class ReviewSummaryResponse(BaseModel):
    total_reviews: int
    average_rating: str
    positive_count: int
    negative_count: int
    neutral_count: int
    positive_percentage: str
    reviews: List[ReviewInfo]
