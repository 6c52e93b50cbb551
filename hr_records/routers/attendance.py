from fastapi import APIRouter, Depends, status
from ..deps import get_service
from ..schemas import AttendanceIn, AttendanceOut, ErrorOut, ValidationErrorOut
from ..service import HRService

router = APIRouter(prefix="/api/attendance", tags=["attendance"])

# Upsert: a second mark for the same employee and date overwrites the status
@router.post(
    "",
    response_model=AttendanceOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorOut}, 404: {"model": ErrorOut}},
)
def mark_attendance(item: AttendanceIn, service: HRService = Depends(get_service)):
    service.require_employee(item.employee_id)
    return service.mark_attendance(item.model_dump())
