from fastapi import APIRouter

from src.veloria.api.dependencies import AdminUser, FinanceServiceDep
from src.veloria.schemas import FinanceOverview

router = APIRouter(prefix="/finance", tags=["finance"])


@router.get("/admin/overview", response_model=FinanceOverview)
async def finance_overview(service: FinanceServiceDep, current_user: AdminUser) -> FinanceOverview:
    """Revenue totals, six months of revenue and recent/upcoming payments."""
    return await service.overview()
