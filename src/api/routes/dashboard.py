from fastapi import APIRouter, Depends, status

from src.api.error import error_to_exception
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import (
    DashboardStatsResponse,
    GetDashboardStatsUseCase,
    GetReviewSummaryUseCase,
    ReviewSummaryResponse,
)
from src.depends import get_super_admin, get_unit_of_work
from src.domain.entities import OperatorContext

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=DashboardStatsResponse)
async def get_stats(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetDashboardStatsUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.get(
    "/reviews", status_code=status.HTTP_200_OK, response_model=ReviewSummaryResponse
)
async def get_reviews(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """App rating summary with the reviews newest first"""
    result = await GetReviewSummaryUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value
