"""
Use Case: Review Summary

Rating statistics and sentiment split for app reviews.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ReviewInfo, ReviewSummaryResponse

POSITIVE_MIN_RATING = 4
NEGATIVE_MAX_RATING = 2


class GetReviewSummaryUseCase:
    """
    Positive means 4-5 stars, negative 1-2 stars, neutral 3 stars.
    Average and percentage are rounded to one decimal; both read "0" when
    there are no reviews.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ReviewSummaryResponse]:
        async with self.uow:
            reviews = await self.uow.reviews.list_newest_first()

        total = len(reviews)
        positive = sum(1 for r in reviews if r.rating >= POSITIVE_MIN_RATING)
        negative = sum(1 for r in reviews if r.rating <= NEGATIVE_MAX_RATING)

        if total:
            average = f"{sum(r.rating for r in reviews) / total:.1f}"
            percentage = f"{positive / total * 100:.1f}"
        else:
            average = percentage = "0"

        return Return.ok(
            ReviewSummaryResponse(
                total_reviews=total,
                average_rating=average,
                positive_count=positive,
                negative_count=negative,
                neutral_count=total - positive - negative,
                positive_percentage=percentage,
                reviews=[
                    ReviewInfo(
                        id=r.id,
                        user_name=r.user_name,
                        user_email=r.user_email,
                        rating=r.rating,
                        feedback=r.feedback,
                        platform=r.platform,
                        created_at=r.created_at.isoformat() if r.created_at else None,
                        sentiment=r.sentiment,
                        sentiment_confidence=r.sentiment_confidence,
                    )
                    for r in reviews
                ],
            )
        )
