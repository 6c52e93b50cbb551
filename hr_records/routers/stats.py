from fastapi import APIRouter, Depends
from ..deps import get_service
from ..schemas import DashboardStats
from ..service import HRService

router = APIRouter(prefix="/api/stats", tags=["stats"])

@router.get("", response_model=DashboardStats)
def dashboard_stats(service: HRService = Depends(get_service)):
    return service.get_dashboard_stats()
